from django import forms

MAX_UPLOAD_SIZE = 5 * 1024 * 1024
ALLOWED_IMAGE_TYPES = ('image/jpeg', 'image/jpg', 'image/png', 'image/webp', 'image/gif')


class MediaUploadForm(forms.Form):
    file = forms.FileField(error_messages={'required': 'No file provided'})
    alt = forms.CharField(max_length=200, required=False)
    caption = forms.CharField(max_length=500, required=False)

    # SEO метадані для ImageKit (/api/upload/)
    context = forms.CharField(max_length=200, required=False)
    alt_text = forms.CharField(max_length=200, required=False)
    description = forms.CharField(max_length=500, required=False)

    def clean_file(self):
        uploaded = self.cleaned_data['file']
        content_type = getattr(uploaded, 'content_type', '') or ''
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise forms.ValidationError('Invalid file type. Only images are allowed.')
        if uploaded.size > MAX_UPLOAD_SIZE:
            raise forms.ValidationError('File too large. Maximum size is 5MB.')
        return uploaded
