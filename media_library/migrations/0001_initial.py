import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('blog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('filename', models.CharField(max_length=255)),
                ('original_name', models.CharField(max_length=255)),
                ('file_path', models.CharField(help_text='Публічний URL файлу', max_length=1000)),
                ('file_size', models.PositiveIntegerField(default=0)),
                ('mime_type', models.CharField(max_length=50)),
                ('alt', models.CharField(blank=True, max_length=200)),
                ('caption', models.CharField(blank=True, max_length=500)),
                ('provider_file_id', models.CharField(blank=True, help_text='fileId в ImageKit', max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Media file',
                'verbose_name_plural': 'Media files',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ArticleMedia',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='media_links', to='blog.article')),
                ('media', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='articles', to='media_library.media')),
            ],
            options={
                'verbose_name': 'Article media',
                'verbose_name_plural': 'Article media',
                'constraints': [models.UniqueConstraint(fields=('article', 'media'), name='unique_article_media')],
            },
        ),
    ]
