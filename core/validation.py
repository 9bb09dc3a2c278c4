# core/validation.py
"""
Валідація JSON запитів і query параметрів через Django форми
"""

import json
import logging

from django.core.validators import RegexValidator

logger = logging.getLogger(__name__)

slug_validator = RegexValidator(
    r'^[a-z0-9-]+$',
    'Slug can only contain lowercase letters, numbers, and hyphens',
)
color_validator = RegexValidator(r'^#[0-9A-Fa-f]{6}$', 'Color must be a hex value like #1E90FF')


def format_form_errors(form) -> str:
    """'field: msg1, msg2; field2: msg' з помилок форми"""
    parts = []
    for field, errors in form.errors.items():
        name = 'non_field_errors' if field == '__all__' else field
        parts.append(f"{name}: {', '.join(str(e) for e in errors)}")
    return '; '.join(parts) or 'Validation failed'


def parse_json_body(request):
    """
    Повертає dict з тіла запиту

    Raises:
        ValueError: тіло не є JSON об'єктом
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError('Invalid JSON in request body') from e
    if not isinstance(data, dict):
        raise ValueError('Invalid JSON in request body')
    return data


def validate_json(request, form_class, partial=False, **form_kwargs):
    """
    Валідує JSON тіло запиту формою

    Args:
        request: HttpRequest
        form_class: клас форми (Form або ModelForm)
        partial: PATCH-семантика - поля, яких немає в тілі, не валідуються і не змінюються
        **form_kwargs: додаткові аргументи форми (instance=...)

    Returns:
        (form, None) якщо валідно, інакше (None, повідомлення про помилку)
    """
    try:
        data = parse_json_body(request)
    except ValueError as e:
        return None, str(e)

    form = form_class(data=data, **form_kwargs)
    if partial:
        for name in list(form.fields):
            if name not in data:
                del form.fields[name]

    if not form.is_valid():
        message = format_form_errors(form)
        logger.info(f"Validation failed for {form_class.__name__}: {message}")
        return None, message

    return form, None


def validate_query(params, form_class):
    """Те саме для query string (request.GET)"""
    form = form_class(data=params)
    if not form.is_valid():
        return None, format_form_errors(form)
    return form, None
