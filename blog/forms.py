from django import forms
from django.utils.translation import gettext_lazy as _

from core.models import Tag
from core.validation import color_validator, slug_validator
from .models import Article, Category, Comment


BAD_WORDS = [
    "fuck",
    "shit",
    "bitch",
    "casino",
    "viagra",
]


class ArticleForm(forms.ModelForm):
    title = forms.CharField(min_length=10, max_length=200)
    slug = forms.CharField(min_length=3, max_length=200, validators=[slug_validator])
    excerpt = forms.CharField(max_length=500, required=False)
    content = forms.CharField(min_length=100)
    featured_image = forms.URLField(max_length=500, required=False)
    category = forms.ModelChoiceField(
        queryset=Category.objects.all(),
        to_field_name="slug",
        error_messages={"required": "Category is required"},
    )
    status = forms.ChoiceField(choices=Article.STATUS_CHOICES, required=False)
    seo_title = forms.CharField(max_length=60, required=False)
    seo_description = forms.CharField(max_length=160, required=False)
    seo_keywords = forms.CharField(max_length=255, required=False)
    tags = forms.ModelMultipleChoiceField(
        queryset=Tag.objects.all(),
        to_field_name="slug",
        required=False,
    )

    class Meta:
        model = Article
        fields = [
            "title", "slug", "excerpt", "content", "featured_image", "category",
            "status", "seo_title", "seo_description", "seo_keywords", "tags",
        ]

    def clean_status(self):
        return self.cleaned_data.get("status") or Article.STATUS_DRAFT


class CategoryForm(forms.ModelForm):
    name = forms.CharField(min_length=2, max_length=100)
    slug = forms.CharField(min_length=2, max_length=100, validators=[slug_validator])
    description = forms.CharField(max_length=500, required=False)
    color = forms.CharField(max_length=7, required=False, validators=[color_validator])
    menu_order = forms.IntegerField(min_value=0, required=False)
    show_in_menu = forms.BooleanField(required=False, initial=True)
    is_active = forms.BooleanField(required=False, initial=True)

    class Meta:
        model = Category
        fields = [
            "name", "slug", "description", "color", "icon",
            "show_in_menu", "menu_order", "is_active", "menu_label",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # булеві поля без значення в JSON вважаються увімкненими
        data = self.data or {}
        self._missing_flags = [name for name in ("show_in_menu", "is_active") if name not in data]

    def clean(self):
        cleaned = super().clean()
        for name in self._missing_flags:
            if name in self.fields:
                cleaned[name] = True
        if cleaned.get("menu_order") is None and "menu_order" in self.fields:
            cleaned["menu_order"] = 0
        return cleaned


class CommentForm(forms.ModelForm):
    author_name = forms.CharField(
        min_length=2,
        max_length=100,
        label=_("Name"),
        widget=forms.TextInput(attrs={
            'class': 'comment-input',
            'placeholder': _('Enter your name'),
        })
    )
    author_email = forms.EmailField(
        label=_("Email"),
        error_messages={"invalid": "Invalid email address"},
        widget=forms.EmailInput(attrs={'class': 'comment-input'}),
    )
    content = forms.CharField(
        min_length=10,
        max_length=1000,
        label=_("Comment"),
        widget=forms.Textarea(attrs={
            'class': 'comment-textarea',
            'placeholder': _('Write your comment here...'),
            'rows': 5,
        })
    )
    website = forms.CharField(required=False, widget=forms.HiddenInput())

    class Meta:
        model = Comment
        fields = ["author_name", "author_email", "content", "parent"]
        widgets = {"parent": forms.HiddenInput()}

    def __init__(self, *args, article=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.article = article
        self.fields["parent"].required = False
        if article is not None:
            self.fields["parent"].queryset = Comment.objects.filter(article=article)

    def clean_website(self):
        value = self.cleaned_data.get("website", "")
        if value:
            raise forms.ValidationError(_("Invalid value."))
        return value

    def clean_content(self):
        value = self.cleaned_data.get("content", "")
        lower = value.lower()
        for word in BAD_WORDS:
            if word in lower:
                raise forms.ValidationError(_("Text contains prohibited words."))
        return value

    def save(self, commit=True):
        comment = super().save(commit=False)
        if self.article is not None:
            comment.article = self.article
        comment.is_approved = False
        if commit:
            comment.save()
        return comment


class SearchForm(forms.Form):
    query = forms.CharField(min_length=2, max_length=100)
    category = forms.CharField(required=False)
    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, max_value=50, required=False)

    def clean_page(self):
        return self.cleaned_data.get("page") or 1

    def clean_limit(self):
        return self.cleaned_data.get("limit") or 10


class PaginationForm(forms.Form):
    SORT_FIELDS = ("published_at", "created_at", "updated_at", "title", "view_count", "seo_score")

    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, max_value=100, required=False)
    sort_by = forms.ChoiceField(choices=[(f, f) for f in SORT_FIELDS], required=False)
    sort_order = forms.ChoiceField(choices=[("asc", "asc"), ("desc", "desc")], required=False)
    category = forms.CharField(required=False)
    search = forms.CharField(max_length=100, required=False)

    def clean_page(self):
        return self.cleaned_data.get("page") or 1

    def clean_limit(self):
        return self.cleaned_data.get("limit") or 10

    def clean_sort_by(self):
        return self.cleaned_data.get("sort_by") or "published_at"

    def clean_sort_order(self):
        return self.cleaned_data.get("sort_order") or "desc"

    def get_ordering(self):
        prefix = "-" if self.cleaned_data["sort_order"] == "desc" else ""
        return f"{prefix}{self.cleaned_data['sort_by']}"


class SEOAnalyzeForm(forms.Form):
    title = forms.CharField(required=False, strip=False)
    description = forms.CharField(required=False, strip=False)
    content = forms.CharField(required=False, strip=False)
    slug = forms.CharField(required=False, strip=False)
    tags = forms.JSONField(required=False)

    def clean_tags(self):
        tags = self.cleaned_data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise forms.ValidationError("Tags must be a list of strings")
        return tags
