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
            name='Event',
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
                ('event_type', models.CharField(choices=[('PRACTICE', 'Practice'), ('GAME', 'Game'), ('MEETING', 'Meeting'), ('CUSTOM', 'Custom')], default='PRACTICE', max_length=10)),
                ('start', models.DateTimeField()),
                ('end', models.DateTimeField()),
                ('location', models.CharField(blank=True, max_length=255)),
                ('notes', models.TextField(blank=True)),
                ('coordinator_type', models.CharField(blank=True, choices=[('OC', 'Offensive Coordinator'), ('DC', 'Defensive Coordinator'), ('ST', 'Special Teams Coordinator')], max_length=2, null=True)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='events', to='team.team')),
            ],
            options={
                'ordering': ['start'],
            },
        ),
        migrations.CreateModel(
            name='CalendarSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('assistants_can_add_meetings', models.BooleanField(default=True)),
                ('assistants_can_add_practices', models.BooleanField(default=False)),
                ('team', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='calendar_settings', to='team.team')),
            ],
        ),
    ]
