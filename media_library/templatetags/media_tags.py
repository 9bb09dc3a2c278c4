from django import template

from media_library.services.imagekit import optimize_image_src

register = template.Library()


@register.filter
def optimized_image(src, size='800x400'):
    """{{ article.featured_image|optimized_image:"400x250" }}"""
    width, _, height = str(size).partition('x')
    return optimize_image_src(src, width=int(width), height=int(height or width))
