import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('team', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DepthChartEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('unit', models.CharField(choices=[('OFFENSE', 'Offense'), ('DEFENSE', 'Defense'), ('SPECIAL_TEAMS', 'Special Teams')], max_length=20)),
                ('position', models.CharField(max_length=20)),
                ('string', models.PositiveSmallIntegerField()),
                ('formation', models.CharField(blank=True, default='', max_length=50)),
                ('special_team_type', models.CharField(blank=True, default='', max_length=30)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('player', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='depth_chart_entries', to='team.player')),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='depth_chart_entries', to='team.team')),
            ],
            options={
                'verbose_name_plural': 'Depth Chart Entries',
                'ordering': ['unit', 'special_team_type', 'position', 'string'],
                'unique_together': {('team', 'unit', 'position', 'string', 'formation', 'special_team_type')},
            },
        ),
        migrations.CreateModel(
            name='PositionLabel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('unit', models.CharField(choices=[('OFFENSE', 'Offense'), ('DEFENSE', 'Defense'), ('SPECIAL_TEAMS', 'Special Teams')], max_length=20)),
                ('position', models.CharField(max_length=20)),
                ('special_team_type', models.CharField(blank=True, default='', max_length=30)),
                ('label', models.CharField(max_length=30)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='position_labels', to='team.team')),
            ],
            options={
                'unique_together': {('team', 'unit', 'position', 'special_team_type')},
            },
        ),
    ]
