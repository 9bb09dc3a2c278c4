from django import template
import json

register = template.Library()


def build_article_schema(article, article_url, site_settings):
    """Schema.org Article для статті блогу"""
    author = article.author.get_full_name() or article.author.get_username()
    published = article.published_at or article.created_at

    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": article.get_seo_title(),
        "description": article.get_seo_description(),
        "image": article.featured_image or site_settings.get_og_image_url(),
        "datePublished": published.isoformat(),
        "dateModified": article.updated_at.isoformat(),
        "author": {
            "@type": "Person",
            "name": author,
        },
        "publisher": {
            "@type": "Organization",
            "name": site_settings.site_name,
            "logo": {
                "@type": "ImageObject",
                "url": site_settings.get_logo_url(),
            },
        },
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": article_url,
        },
        "articleSection": article.category.name,
        "inLanguage": "en-US",
    }


@register.inclusion_tag('blog/json_ld.html', takes_context=True)
def article_json_ld(context, article):
    """
    Генерує JSON-LD розмітку для статті
    """
    from core.models import SiteSettings

    site_settings = context.get('site_settings') or SiteSettings.load()

    # Абсолютний URL статті: від запиту, якщо він є, інакше від SITE_URL
    request = context.get('request')
    if request:
        article_url = request.build_absolute_uri(article.get_absolute_url())
    else:
        article_url = f"{site_settings.get_site_url()}{article.get_absolute_url()}"

    schema = build_article_schema(article, article_url, site_settings)

    return {
        # </ екрануємо, щоб вміст статті не закрив тег script
        'schema_json': json.dumps(schema, ensure_ascii=False, indent=2).replace('</', '<\\/')
    }
