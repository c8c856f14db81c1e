import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Car',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Display name of the car', max_length=255)),
                ('price', models.PositiveIntegerField(help_text='Rental price per day', validators=[django.core.validators.MinValueValidator(0)])),
                ('size', models.CharField(choices=[('small', 'Small'), ('medium', 'Medium'), ('large', 'Large')], default='small', help_text='Size category of the car', max_length=10)),
                ('image', models.CharField(blank=True, default='', help_text='Path or URL of the car picture', max_length=255)),
                ('is_currently_rented', models.BooleanField(default=False, help_text='Whether a rental window currently covers this car')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'car',
                'verbose_name_plural': 'cars',
                'db_table': 'cars',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['name'], name='cars_name_idx'),
                    models.Index(fields=['size'], name='cars_size_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='UserCar',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('rent_started_at', models.DateTimeField(help_text='When the rental starts')),
                ('rent_ended_at', models.DateTimeField(blank=True, help_text='When the rental ends (empty means open-ended)', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('car', models.ForeignKey(help_text='Car being rented', on_delete=django.db.models.deletion.CASCADE, related_name='rentals', to='cars.car')),
                ('user', models.ForeignKey(help_text='User who rented the car', on_delete=django.db.models.deletion.CASCADE, related_name='rentals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'rental',
                'verbose_name_plural': 'rentals',
                'db_table': 'user_cars',
                'ordering': ['-rent_started_at'],
                'indexes': [
                    models.Index(fields=['car', 'rent_started_at'], name='user_cars_car_start_idx'),
                ],
            },
        ),
    ]
