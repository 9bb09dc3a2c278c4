from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

from .models import SiteSettings, Tag
from .validation import color_validator, slug_validator

SOCIAL_NETWORKS = ('twitter', 'facebook', 'instagram', 'youtube')


class TagForm(forms.ModelForm):
    name = forms.CharField(min_length=2, max_length=50)
    slug = forms.CharField(min_length=2, max_length=50, validators=[slug_validator])
    description = forms.CharField(max_length=200, required=False)
    color = forms.CharField(max_length=7, required=False, validators=[color_validator])

    class Meta:
        model = Tag
        fields = ['name', 'slug', 'description', 'color']

    def clean_color(self):
        return self.cleaned_data.get('color') or '#007bff'


class SiteSettingsForm(forms.ModelForm):
    site_name = forms.CharField(min_length=1, max_length=100)
    site_description = forms.CharField(max_length=500, required=False)
    default_meta_title = forms.CharField(max_length=60, required=False)
    default_meta_description = forms.CharField(max_length=160, required=False)

    class Meta:
        model = SiteSettings
        fields = [
            'site_name', 'site_description', 'site_url',
            'logo_url', 'favicon_url', 'og_image_url',
            'default_meta_title', 'default_meta_description', 'default_meta_keywords',
            'contact_email', 'social_links',
        ]

    def clean_social_links(self):
        links = self.cleaned_data.get('social_links') or {}
        if not isinstance(links, dict):
            raise ValidationError('Social links must be an object')

        unknown = set(links) - set(SOCIAL_NETWORKS)
        if unknown:
            raise ValidationError(f"Unknown networks: {', '.join(sorted(unknown))}")

        validate_url = URLValidator()
        for network, url in links.items():
            if url:
                try:
                    validate_url(url)
                except ValidationError:
                    raise ValidationError(f'{network}: Enter a valid URL.')
        return links
