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
            name='FormationTemplate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('side', models.CharField(choices=[('OFFENSE', 'Offense'), ('DEFENSE', 'Defense'), ('SPECIAL_TEAMS', 'Special Teams')], max_length=20)),
                ('shapes', models.JSONField(default=list, help_text='Eleven {kind, label, x, y} shapes in canvas percent.')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='formation_templates', to='team.team')),
            ],
            options={
                'ordering': ['side', 'name'],
                'unique_together': {('team', 'name')},
            },
        ),
    ]
