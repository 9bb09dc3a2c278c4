from django.urls import path
from .views import (
    add_comment,
    article_detail,
    article_list,
    category_detail,
    search,
    tag_detail,
)

app_name = "blog"

urlpatterns = [
    path("articles/", article_list, name="article_list"),
    path("article/<slug:slug>/", article_detail, name="article_detail"),
    path("article/<slug:slug>/comment/", add_comment, name="add_comment"),
    path("category/<slug:slug>/", category_detail, name="category_detail"),
    path("tag/<slug:slug>/", tag_detail, name="tag_detail"),
    path("search/", search, name="search"),
]
