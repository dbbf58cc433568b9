import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('team', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Document',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('visibility', models.CharField(choices=[('staff', 'Staff Only'), ('players', 'Players & Staff'), ('parents', 'Parents'), ('all', 'Everyone')], default='players', max_length=10)),
                ('scoped_unit', models.CharField(blank=True, choices=[('OFFENSE', 'Offense'), ('DEFENSE', 'Defense'), ('SPECIAL_TEAMS', 'Special Teams')], max_length=20, null=True)),
                ('scoped_position_groups', models.JSONField(blank=True, null=True)),
                ('scoped_player_ids', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('title', models.CharField(max_length=200)),
                ('url', models.URLField(help_text='Link to the stored file; uploads are handled elsewhere.', max_length=500)),
                ('category', models.CharField(blank=True, max_length=50)),
                ('description', models.TextField(blank=True)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='team.team')),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
