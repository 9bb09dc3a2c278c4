# blog/api.py
"""
JSON API блогу: статті, категорії, теги, коментарі, перегляди, SEO аналіз
"""

import logging

from django.conf import settings
from django.core.paginator import Paginator
from django.db import transaction
from django.db.models import F, Q
from django.http import Http404

from core.api import api_view, is_staff_user, json_error, json_success
from core.forms import TagForm
from core.models import Tag
from core.validation import format_form_errors, parse_json_body, validate_json, validate_query
from .forms import ArticleForm, CategoryForm, CommentForm, PaginationForm, SearchForm, SEOAnalyzeForm
from .models import Article, Category, Comment
from .seo import analyze_seo

logger = logging.getLogger(__name__)


def serialize_article(article, full=False):
    data = {
        'id': article.pk,
        'title': article.title,
        'slug': article.slug,
        'excerpt': article.excerpt,
        'featured_image': article.featured_image,
        'status': article.status,
        'category': {
            'name': article.category.name,
            'slug': article.category.slug,
            'color': article.category.color,
        },
        'author': article.author.get_full_name() or article.author.get_username(),
        'tags': [{'name': t.name, 'slug': t.slug, 'color': t.color} for t in article.tags.all()],
        'seo_score': article.seo_score,
        'view_count': article.view_count,
        'read_time': article.get_read_time(),
        'published_at': article.published_at.isoformat() if article.published_at else None,
        'updated_at': article.updated_at.isoformat(),
        'url': article.get_absolute_url(),
    }
    if full:
        data.update({
            'content': article.content,
            'seo_title': article.seo_title,
            'seo_description': article.seo_description,
            'seo_keywords': article.seo_keywords,
            'created_at': article.created_at.isoformat(),
        })
    return data


def serialize_category(category):
    return {
        'id': category.pk,
        'name': category.name,
        'slug': category.slug,
        'description': category.description,
        'color': category.color,
        'icon': category.icon,
        'show_in_menu': category.show_in_menu,
        'menu_order': category.menu_order,
        'menu_label': category.get_menu_label(),
        'is_active': category.is_active,
    }


def serialize_tag(tag):
    return {
        'id': tag.pk,
        'name': tag.name,
        'slug': tag.slug,
        'description': tag.description,
        'color': tag.color,
        'usage_count': tag.usage_count,
    }


def serialize_comment(comment):
    return {
        'id': comment.pk,
        'article': comment.article.slug,
        'parent': comment.parent_id,
        'author_name': comment.author_name,
        'content': comment.content,
        'is_approved': comment.is_approved,
        'created_at': comment.created_at.isoformat(),
    }


def _get_article_for_write(slug):
    try:
        return Article.objects.get(slug=slug)
    except Article.DoesNotExist:
        raise Http404('Article not found')


@api_view(['POST'])
def article_view(request):
    """Атомарно збільшує лічильник переглядів опублікованої статті"""
    try:
        data = parse_json_body(request)
    except ValueError as e:
        return json_error(str(e))

    slug = data.get('slug')
    if not slug or not isinstance(slug, str):
        return json_error('Article slug is required')

    logger.info(f"📊 Incrementing view count for article: {slug}")
    updated = Article.objects.published().filter(slug=slug).update(view_count=F('view_count') + 1)
    if not updated:
        logger.info(f"❌ Article not found: {slug}")
        return json_error('Article not found', status=404)

    view_count = Article.objects.filter(slug=slug).values_list('view_count', flat=True).first()
    logger.info(f"✅ View count incremented: {slug} ({view_count} views)")
    return json_success({'slug': slug, 'view_count': view_count})


@api_view(['GET', 'POST'], staff_methods=['POST'])
def article_collection(request):
    if request.method == 'POST':
        form, error = validate_json(request, ArticleForm, instance=Article(author=request.user))
        if error:
            return json_error(error)
        with transaction.atomic():
            article = form.save()
        # seo_score перераховується сигналом після збереження тегів
        article.refresh_from_db()
        logger.info(f"✅ Article created: {article.slug} (SEO {article.seo_score})")
        return json_success(serialize_article(article, full=True), status=201)

    form, error = validate_query(request.GET, PaginationForm)
    if error:
        return json_error(error)
    params = form.cleaned_data

    articles = (
        Article.objects.published()
        .select_related('category', 'author')
        .prefetch_related('tags')
        .order_by(form.get_ordering(), '-created_at')
    )
    if params['category']:
        articles = articles.filter(category__slug=params['category'])
    if params['search']:
        # пошук має власні межі: запит 2-100 символів, limit до 50
        search_form, error = validate_query({**request.GET.dict(), 'query': params['search']}, SearchForm)
        if error:
            return json_error(error)
        params['limit'] = search_form.cleaned_data['limit']
        query = search_form.cleaned_data['query']
        articles = articles.filter(
            Q(title__icontains=query) | Q(excerpt__icontains=query) | Q(content__icontains=query)
        )

    paginator = Paginator(articles, params['limit'])
    page = paginator.get_page(params['page'])
    return json_success(
        [serialize_article(a) for a in page],
        pagination={
            'page': page.number,
            'limit': params['limit'],
            'total': paginator.count,
            'pages': paginator.num_pages,
        },
    )


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'], staff_methods=['PUT', 'PATCH', 'DELETE'])
def article_detail(request, slug):
    if request.method == 'GET':
        queryset = Article.objects.select_related('category', 'author').prefetch_related('tags')
        if not is_staff_user(request.user):
            queryset = queryset.published()
        try:
            article = queryset.get(slug=slug)
        except Article.DoesNotExist:
            return json_error('Article not found', status=404)
        return json_success(serialize_article(article, full=True))

    article = _get_article_for_write(slug)

    if request.method == 'DELETE':
        article.delete()
        logger.info(f"🗑️ Article deleted: {slug}")
        return json_success(message='Article deleted')

    form, error = validate_json(request, ArticleForm, partial=request.method == 'PATCH', instance=article)
    if error:
        return json_error(error)
    with transaction.atomic():
        article = form.save()
    article.refresh_from_db()
    logger.info(f"✅ Article updated: {article.slug} (SEO {article.seo_score})")
    return json_success(serialize_article(article, full=True))


@api_view(['GET', 'POST'], staff_methods=['POST'])
def category_collection(request):
    if request.method == 'POST':
        form, error = validate_json(request, CategoryForm)
        if error:
            return json_error(error)
        category = form.save()
        return json_success(serialize_category(category), status=201)

    categories = Category.objects.filter(is_active=True)
    if request.GET.get('menu') == 'true':
        categories = categories.filter(show_in_menu=True)
    return json_success([serialize_category(c) for c in categories])


@api_view(['GET', 'POST'], staff_methods=['POST'])
def tag_collection(request):
    if request.method == 'POST':
        form, error = validate_json(request, TagForm)
        if error:
            return json_error(error)
        tag = form.save()
        return json_success(serialize_tag(tag), status=201)

    tags = Tag.objects.all()
    if request.GET.get('popular') == 'true':
        tags = Tag.get_popular_tags()
    return json_success([serialize_tag(t) for t in tags])


@api_view(['POST'])
def comment_create(request):
    """Публічне створення коментаря, чекає модерації"""
    try:
        data = parse_json_body(request)
    except ValueError as e:
        return json_error(str(e))

    article_slug = data.get('article')
    if not article_slug:
        return json_error('article: This field is required.')
    try:
        article = Article.objects.published().get(slug=article_slug)
    except Article.DoesNotExist:
        return json_error('Article not found', status=404)

    form = CommentForm(data=data, article=article)
    if not form.is_valid():
        return json_error(format_form_errors(form))

    comment = form.save()
    logger.info(f"💬 New comment #{comment.pk} on {article.slug} awaiting moderation")
    return json_success(serialize_comment(comment), status=201, message='Comment submitted for moderation')


@api_view(['POST'], staff_methods=['POST'])
def seo_analyze(request):
    form, error = validate_json(request, SEOAnalyzeForm)
    if error:
        return json_error(error)
    data = form.cleaned_data
    analysis = analyze_seo(
        title=data['title'],
        description=data['description'],
        content=data['content'],
        slug=data['slug'],
        tags=data['tags'],
        internal_domain=getattr(settings, 'SEO_INTERNAL_DOMAIN', ''),
    )
    return json_success(analysis.to_dict())
