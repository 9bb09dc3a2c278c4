# blog/signals.py

from django.db.models.signals import m2m_changed, post_delete, pre_delete
from django.dispatch import receiver
import logging

from core.models import Tag
from .models import Article
from .tasks import recompute_seo_scores

logger = logging.getLogger(__name__)


def _refresh_tags(tag_ids):
    for tag in Tag.objects.filter(pk__in=tag_ids):
        tag.update_usage_count()


def _refresh_seo_scores(article_ids):
    recompute_seo_scores(Article.objects.filter(pk__in=article_ids))


# === СИГНАЛ для лічильників тегів і SEO оцінки ===

@receiver(m2m_changed, sender=Article.tags.through)
def sync_article_tags(sender, instance, action, reverse, pk_set, **kwargs):
    """Оновлює usage_count тегів і seo_score статей при зміні зв'язків"""

    if action == 'pre_clear':
        if reverse:
            instance._cleared_related_ids = set(instance.articles.values_list('pk', flat=True))
        else:
            instance._cleared_related_ids = set(instance.tags.values_list('pk', flat=True))
        return

    if action not in ('post_add', 'post_remove', 'post_clear'):
        return

    related_ids = pk_set if action != 'post_clear' else getattr(instance, '_cleared_related_ids', set())

    if reverse:
        tag_ids, article_ids = {instance.pk}, set(related_ids or ())
    else:
        tag_ids, article_ids = set(related_ids or ()), {instance.pk}

    _refresh_tags(tag_ids)
    _refresh_seo_scores(article_ids)
    logger.info(f"🏷️ Tags synced ({action}): {len(tag_ids)} tags, {len(article_ids)} articles")


@receiver(pre_delete, sender=Article)
def remember_article_tags(sender, instance, **kwargs):
    instance._deleted_tag_ids = list(instance.tags.values_list('pk', flat=True))


@receiver(post_delete, sender=Article)
def refresh_tags_after_delete(sender, instance, **kwargs):
    _refresh_tags(getattr(instance, '_deleted_tag_ids', []))
