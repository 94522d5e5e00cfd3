import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('showcase', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Ribbon',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('length', models.PositiveIntegerField(default=1)),
                ('balloon', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ribbons', to='showcase.balloon')),
            ],
            options={
                'abstract': False,
            },
        ),
    ]
