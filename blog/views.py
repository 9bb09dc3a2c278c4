from django.contrib import messages
from django.core.paginator import Paginator
from django.db.models import Q
from django.shortcuts import render, get_object_or_404, redirect
from django.views.decorators.http import require_POST
import logging

from core.models import Tag
from .forms import CommentForm, SearchForm
from .models import Article, Category

logger = logging.getLogger(__name__)

ARTICLES_PER_PAGE = 12


def _published():
    return Article.objects.published().select_related("category", "author").prefetch_related("tags")


def _paginate(request, queryset):
    paginator = Paginator(queryset, ARTICLES_PER_PAGE)
    return paginator.get_page(request.GET.get("page"))


def article_list(request):
    articles = _published()
    category_slug = request.GET.get("category")
    current_category = None
    if category_slug:
        current_category = get_object_or_404(Category, slug=category_slug, is_active=True)
        articles = articles.filter(category=current_category)

    page_obj = _paginate(request, articles)

    return render(
        request,
        "blog/article_list.html",
        {
            "articles": page_obj,
            "page_obj": page_obj,
            "current_category": current_category,
            "breadcrumbs": [{"name": "Articles", "url": request.path}],
        },
    )


def article_detail(request, slug):
    article = get_object_or_404(_published(), slug=slug)

    return render(
        request,
        "blog/article_detail.html",
        {
            "article": article,
            "comments": article.get_approved_comments(),
            "comment_form": CommentForm(article=article),
            "related_articles": article.get_related_articles(limit=3),
            "og_title": article.get_seo_title(),
            "og_description": article.get_seo_description(),
            "og_image": article.featured_image or None,
            "og_url": request.build_absolute_uri(),
            "breadcrumbs": [
                {"name": article.category.name, "url": article.category.get_absolute_url()},
                {"name": article.title, "url": request.path},
            ],
        },
    )


@require_POST
def add_comment(request, slug):
    article = get_object_or_404(Article.objects.published(), slug=slug)
    form = CommentForm(request.POST, article=article)

    if form.is_valid():
        comment = form.save()
        logger.info(f"💬 New comment #{comment.pk} on {article.slug} awaiting moderation")
        messages.success(request, "Your comment has been submitted and is awaiting moderation.")
    else:
        messages.error(request, "Comment could not be submitted. Please check the form.")

    return redirect(article.get_absolute_url() + "#comments")


def category_detail(request, slug):
    category = get_object_or_404(Category, slug=slug, is_active=True)
    page_obj = _paginate(request, _published().filter(category=category))

    return render(
        request,
        "blog/category_detail.html",
        {
            "category": category,
            "articles": page_obj,
            "page_obj": page_obj,
            "breadcrumbs": [{"name": category.name, "url": request.path}],
        },
    )


def tag_detail(request, slug):
    tag = get_object_or_404(Tag, slug=slug)
    page_obj = _paginate(request, _published().filter(tags=tag))

    return render(
        request,
        "blog/tag_detail.html",
        {
            "tag": tag,
            "articles": page_obj,
            "page_obj": page_obj,
            "breadcrumbs": [{"name": f"#{tag.name}", "url": request.path}],
        },
    )


def search(request):
    query = (request.GET.get("q") or "").strip()
    articles = Article.objects.none()

    form = SearchForm({"query": query, "category": request.GET.get("category", "")})
    if form.is_valid():
        query = form.cleaned_data["query"]
        articles = _published().filter(
            Q(title__icontains=query)
            | Q(excerpt__icontains=query)
            | Q(content__icontains=query)
            | Q(tags__name__icontains=query)
        ).distinct()
        if form.cleaned_data["category"]:
            articles = articles.filter(category__slug=form.cleaned_data["category"])

    page_obj = _paginate(request, articles)

    return render(
        request,
        "blog/search.html",
        {
            "query": query,
            "articles": page_obj,
            "page_obj": page_obj,
            "results_count": page_obj.paginator.count,
        },
    )
