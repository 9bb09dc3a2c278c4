# blog/tasks.py
"""
Celery завдання блогу
"""

from celery import shared_task
import logging

from .models import Article

logger = logging.getLogger(__name__)


def recompute_seo_scores(queryset=None):
    """
    Перераховує seo_score; повертає кількість статей, у яких оцінка змінилась
    """
    if queryset is None:
        queryset = Article.objects.exclude(status=Article.STATUS_ARCHIVED)

    changed = 0
    for article in queryset.prefetch_related('tags').iterator(chunk_size=200):
        score = article.run_seo_analysis().score
        if score != article.seo_score:
            # update(), щоб не зсувати updated_at (lastmod у sitemap)
            Article.objects.filter(pk=article.pk).update(seo_score=score)
            changed += 1
    return changed


@shared_task(name="blog.refresh_seo_scores")
def refresh_seo_scores_task():
    """
    Нічне оновлення закешованих SEO оцінок неархівних статей
    """
    changed = recompute_seo_scores()
    logger.info(f"🔍 SEO scores refreshed, {changed} articles changed")
    return changed
