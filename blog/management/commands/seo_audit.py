# blog/management/commands/seo_audit.py
from django.core.management.base import BaseCommand

from blog.models import Article
from blog.tasks import recompute_seo_scores


class Command(BaseCommand):
    help = 'Звіт по SEO оцінках статей (опційно з перерахунком)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--update',
            action='store_true',
            help='Перерахувати та зберегти seo_score перед звітом'
        )
        parser.add_argument(
            '--min-score',
            type=int,
            default=None,
            help='Показати лише статті з оцінкою нижче цього порогу'
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('🔍 SEO audit'))
        self.stdout.write('=' * 70)

        articles = Article.objects.exclude(status=Article.STATUS_ARCHIVED)

        if options['update']:
            changed = recompute_seo_scores(articles)
            self.stdout.write(f'♻️ Оновлено оцінок: {changed}')

        min_score = options['min_score']
        if min_score is not None:
            articles = articles.filter(seo_score__lt=min_score)

        articles = articles.order_by('seo_score', 'title')
        total = 0
        for article in articles:
            total += 1
            style = self.style.SUCCESS if article.seo_score >= 75 else (
                self.style.WARNING if article.seo_score >= 40 else self.style.ERROR
            )
            self.stdout.write(style(
                f'{article.seo_score:>3}/100  {article.seo_score_label:<10}  {article.status:<9}  {article.slug}'
            ))

        self.stdout.write('-' * 70)
        self.stdout.write(self.style.SUCCESS(f'📊 Статей у звіті: {total}'))
