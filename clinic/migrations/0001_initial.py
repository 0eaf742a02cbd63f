from django.db import migrations, models

import clinic.models


def _base_fields():
    return [
        ('id', models.CharField(default=clinic.models.new_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Appointment',
            fields=_base_fields() + [
                ('patient_name', models.CharField(max_length=120)),
                ('phone', models.CharField(max_length=32)),
                ('department', models.CharField(max_length=120)),
                ('date', models.CharField(max_length=64)),
                ('reason', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], db_index=True, default='pending', max_length=16)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='BlogPost',
            fields=_base_fields() + [
                ('title', models.CharField(max_length=255)),
                ('slug', models.CharField(max_length=320, unique=True)),
                ('summary', models.TextField()),
                ('content', models.TextField()),
                ('image', models.CharField(max_length=1024)),
                ('public_id', models.CharField(blank=True, max_length=255, null=True)),
                ('author', models.CharField(default='Dr. Sonil', max_length=120)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SiteConfig',
            fields=_base_fields() + [
                ('key', models.CharField(default='main', max_length=32, unique=True)),
                ('name', models.CharField(default="Dr. Sonil Women's Care Centre", max_length=255)),
                ('doctor_name', models.CharField(default='Dr. Sonil Srivastava', max_length=255)),
                ('designation', models.CharField(default='Best Gynecologist & IVF Specialist', max_length=255)),
                ('logo', models.CharField(blank=True, default='', max_length=1024)),
                ('favicon', models.CharField(blank=True, default='', max_length=1024)),
                ('doctor_image', models.CharField(blank=True, default='', max_length=1024)),
                ('reasons_image', models.CharField(blank=True, default='https://images.unsplash.com/photo-1555252333-9f8e92e65df4?q=80&w=1000', max_length=1024)),
                ('about_video', models.CharField(blank=True, default='https://www.youtube.com/watch?v=pL78_6q7eLg', max_length=1024)),
                ('phone', models.CharField(default='+91 98765 43210', max_length=64)),
                ('email', models.CharField(default='hello@drsonil.com', max_length=255)),
                ('address', models.CharField(default='E-7/123, Arera Colony, Bhopal', max_length=512)),
                ('whatsapp', models.CharField(blank=True, default='919876543210', max_length=64)),
                ('timings', models.CharField(blank=True, default='Mon - Sat: 10:00 AM - 08:00 PM', max_length=255)),
                ('google_map_link', models.CharField(blank=True, default='https://goo.gl/maps/placeholder', max_length=1024)),
                ('google_place_id', models.CharField(blank=True, default='', max_length=255)),
                ('socials', models.JSONField(blank=True, default=clinic.models.default_socials)),
                ('announcement', models.TextField(blank=True, default='')),
                ('admin_password', models.CharField(max_length=255)),
            ],
            options={
                'verbose_name': 'site configuration',
            },
        ),
        migrations.CreateModel(
            name='Content',
            fields=_base_fields() + [
                ('type', models.CharField(choices=[('service', 'Service'), ('faq', 'FAQ'), ('testimonial', 'Testimonial'), ('doctor', 'Doctor')], db_index=True, max_length=16)),
                ('data', models.JSONField()),
                ('order', models.IntegerField(default=0)),
            ],
            options={
                'ordering': ['order', '-created_at'],
            },
        ),
        migrations.CreateModel(
            name='GalleryItem',
            fields=_base_fields() + [
                ('url', models.CharField(max_length=1024)),
                ('public_id', models.CharField(blank=True, max_length=255, null=True)),
                ('title', models.CharField(max_length=255)),
                ('category', models.CharField(choices=[('clinic', 'Clinic'), ('events', 'Events'), ('patients', 'Patients'), ('surgery', 'Surgery'), ('videos', 'Videos')], default='clinic', max_length=16)),
                ('type', models.CharField(choices=[('image', 'Image'), ('video', 'Video'), ('reel', 'Reel')], default='image', max_length=8)),
                ('featured', models.BooleanField(db_index=True, default=False)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='HeroSlide',
            fields=_base_fields() + [
                ('image', models.CharField(max_length=1024)),
                ('public_id', models.CharField(blank=True, max_length=255, null=True)),
                ('title', models.CharField(max_length=255)),
                ('subtitle', models.CharField(max_length=512)),
            ],
            options={
                'ordering': ['created_at'],
            },
        ),
    ]
