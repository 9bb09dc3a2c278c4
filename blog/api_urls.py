from django.urls import path
from . import api

app_name = "blog_api"

urlpatterns = [
    path("article-view/", api.article_view, name="article_view"),
    path("articles/", api.article_collection, name="article_collection"),
    path("articles/<slug:slug>/", api.article_detail, name="article_detail"),
    path("categories/", api.category_collection, name="category_collection"),
    path("tags/", api.tag_collection, name="tag_collection"),
    path("comments/", api.comment_create, name="comment_create"),
    path("seo/analyze/", api.seo_analyze, name="seo_analyze"),
]
