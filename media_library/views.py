# media_library/views.py
"""
API медіатеки: завантаження зображень статей і керування файлами
"""

import logging

from core.api import api_view, json_error, json_success
from core.validation import format_form_errors
from .forms import MediaUploadForm
from .models import Media
from .services.imagekit import ImageKitClient, ImageKitError
from .services.uploads import fallback_upload_payload, remove_media, store_media, upload_to_imagekit

logger = logging.getLogger(__name__)


def _validated_upload(request):
    form = MediaUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        return None, json_error(format_form_errors(form))
    return form, None


@api_view(['POST'], staff_methods=['POST'])
def upload_image(request):
    """Завантаження зображення в ImageKit з SEO-назвою; без ImageKit повертає заглушку"""
    logger.info("🔧 Upload API called")
    form, error_response = _validated_upload(request)
    if error_response:
        return error_response

    data = form.cleaned_data
    uploaded = data['file']
    context = data['context'] or None
    alt_text = data['alt_text'] or data['alt'] or None

    client = ImageKitClient()
    if not client.is_configured:
        logger.warning("⚠️ ImageKit not configured, using fallback upload")
        return json_success(**fallback_upload_payload(uploaded, context, alt_text))

    try:
        payload = upload_to_imagekit(
            uploaded,
            context=context,
            alt_text=alt_text,
            description=data['description'] or None,
            client=client,
        )
    except ImageKitError as e:
        logger.error(f"❌ Upload failed: {e}")
        return json_error('Failed to upload image', status=500)

    logger.info(f"✅ Uploaded {payload['seo_filename']}")
    return json_success(**payload)


@api_view(['GET', 'POST', 'DELETE'], staff_methods=['GET', 'POST', 'DELETE'])
def admin_media(request):
    if request.method == 'POST':
        form, error_response = _validated_upload(request)
        if error_response:
            return error_response
        try:
            media = store_media(
                form.cleaned_data['file'],
                alt=form.cleaned_data['alt'],
                caption=form.cleaned_data['caption'],
            )
        except ImageKitError as e:
            logger.error(f"❌ Error uploading file: {e}")
            return json_error('Failed to upload file', status=500)
        return json_success(media.to_dict(), status=201, message='File uploaded successfully')

    if request.method == 'DELETE':
        file_id = request.GET.get('id')
        if not file_id:
            return json_error('File ID is required')
        if not file_id.isdigit():
            return json_error('File not found', status=404)
        media = Media.objects.filter(pk=file_id).first()
        if media is None:
            logger.info(f"⚠️ File not found for deletion: {file_id}")
            return json_error('File not found', status=404)
        try:
            remove_media(media)
        except ImageKitError as e:
            logger.error(f"❌ Error deleting file: {e}")
            return json_error('Failed to delete file', status=500)
        logger.info(f"✅ File deleted: {file_id}")
        return json_success(message='File deleted successfully')

    logger.info("📁 Fetching media files...")
    files = [media.to_dict() for media in Media.objects.prefetch_related('articles__article')]
    return json_success({
        'files': files,
        'stats': {
            'total_files': len(files),
            'total_size': sum(f['size'] for f in files),
            'total_usage': sum(f['used_in_articles'] for f in files),
        },
    })
