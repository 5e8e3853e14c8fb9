from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='WishlistItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.CharField(db_index=True, max_length=255)),
                ('name', models.CharField(max_length=200)),
                ('address', models.CharField(blank=True, max_length=500)),
                ('city', models.CharField(blank=True, max_length=200)),
                ('place_id', models.CharField(blank=True, max_length=255)),
                ('photo_reference', models.CharField(blank=True, max_length=1000)),
                ('lat', models.FloatField(blank=True, null=True)),
                ('lng', models.FloatField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'wishlist',
                'ordering': ['-created_at'],
                'constraints': [models.UniqueConstraint(condition=models.Q(('place_id', ''), _negated=True), fields=('user_id', 'place_id'), name='unique_wishlist_place_per_user')],
            },
        ),
    ]
