# core/api.py
"""
Спільні хелпери для JSON API: конверт відповіді, методи, доступ staff
"""

import logging
from functools import wraps

from django.http import Http404, JsonResponse
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


def json_error(message, status=400):
    return JsonResponse({'success': False, 'error': message}, status=status)


def json_success(payload=None, status=200, **extra):
    data = {'success': True}
    if payload is not None:
        data['data'] = payload
    data.update(extra)
    return JsonResponse(data, status=status)


def is_staff_user(user) -> bool:
    return bool(user and user.is_authenticated and user.is_staff)


def api_view(methods, staff_methods=()):
    """
    Декоратор JSON ендпоінтів

    Args:
        methods: дозволені HTTP методи
        staff_methods: методи, що потребують is_staff

    Невідомий метод → 405, не staff → 403, Http404 → 404,
    будь-яка інша помилка логується і віддається як 500.
    """
    methods = [m.upper() for m in methods]
    staff_methods = [m.upper() for m in staff_methods]

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if request.method not in methods:
                response = json_error(f'Method {request.method} not allowed', status=405)
                response['Allow'] = ', '.join(methods)
                return response

            if request.method in staff_methods and not is_staff_user(request.user):
                logger.warning(f"🚫 Non-staff {request.method} {request.path}")
                return json_error('Unauthorized', status=403)

            try:
                return view_func(request, *args, **kwargs)
            except Http404 as e:
                return json_error(str(e) or 'Not found', status=404)
            except Exception as e:
                logger.error(f"❌ API error on {request.method} {request.path}: {e}", exc_info=True)
                return json_error('Internal server error', status=500)

        return wrapper

    return decorator
