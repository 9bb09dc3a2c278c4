from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('media_library', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='media',
            name='storage_name',
            field=models.CharField(blank=True, help_text='Шлях у default_storage для локальних файлів', max_length=255),
        ),
    ]
