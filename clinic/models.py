"""
Database models for the clinic website.

Each model is one collection of the site's document store: appointment
requests, blog posts, the singleton site configuration, polymorphic
content items, gallery items and hero slides.  Primary keys are
ObjectId-shaped 24 character hex strings generated by the store so
that clients can tell an id from a blog slug without a round trip.
"""
from __future__ import annotations

import secrets

from django.db import models


def new_object_id() -> str:
    """Return a fresh 24 character lowercase hex identifier."""
    return secrets.token_hex(12)


class Document(models.Model):
    """Common id and timestamps shared by every collection."""
    id = models.CharField(max_length=24, primary_key=True, default=new_object_id, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Fields never exposed on the wire.
    HIDDEN_FIELDS: tuple[str, ...] = ()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        # Required fields and choices are enforced on every write;
        # uniqueness is left to the database constraints.
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)


class Appointment(Document):
    """A booking request submitted through the public contact form."""
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    patient_name = models.CharField(max_length=120)
    phone = models.CharField(max_length=32)
    department = models.CharField(max_length=120)
    # Free-form date string as typed by the patient (usually YYYY-MM-DD)
    date = models.CharField(max_length=64)
    reason = models.TextField(blank=True, default='')
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.patient_name} ({self.department}, {self.date})"


class BlogPost(Document):
    title = models.CharField(max_length=255)
    slug = models.CharField(max_length=320, unique=True)
    summary = models.TextField()
    content = models.TextField()
    image = models.CharField(max_length=1024)
    public_id = models.CharField(max_length=255, blank=True, null=True)
    author = models.CharField(max_length=120, default='Dr. Sonil')

    HIDDEN_FIELDS = ('public_id',)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:
        return self.title


def default_socials() -> dict:
    return {
        'instagram': 'https://instagram.com',
        'facebook': 'https://facebook.com',
        'youtube': 'https://youtube.com',
    }


class SiteConfig(Document):
    """The singleton site configuration (``key='main'``).

    Holds the public metadata shown across every page plus the hashed
    admin password.  The unique ``key`` column guarantees that two
    racing lazy-creates cannot produce two configurations.
    """
    MAIN_KEY = 'main'

    key = models.CharField(max_length=32, unique=True, default=MAIN_KEY)

    # Basic info
    name = models.CharField(max_length=255, default="Dr. Sonil Women's Care Centre")
    doctor_name = models.CharField(max_length=255, default='Dr. Sonil Srivastava')
    designation = models.CharField(max_length=255, default='Best Gynecologist & IVF Specialist')

    # Images
    logo = models.CharField(max_length=1024, blank=True, default='')
    favicon = models.CharField(max_length=1024, blank=True, default='')
    doctor_image = models.CharField(max_length=1024, blank=True, default='')
    reasons_image = models.CharField(
        max_length=1024, blank=True,
        default='https://images.unsplash.com/photo-1555252333-9f8e92e65df4?q=80&w=1000',
    )
    about_video = models.CharField(max_length=1024, blank=True, default='https://www.youtube.com/watch?v=pL78_6q7eLg')

    # Contact
    phone = models.CharField(max_length=64, default='+91 98765 43210')
    email = models.CharField(max_length=255, default='hello@drsonil.com')
    address = models.CharField(max_length=512, default='E-7/123, Arera Colony, Bhopal')
    whatsapp = models.CharField(max_length=64, blank=True, default='919876543210')
    timings = models.CharField(max_length=255, blank=True, default='Mon - Sat: 10:00 AM - 08:00 PM')

    # Map
    google_map_link = models.CharField(max_length=1024, blank=True, default='https://goo.gl/maps/placeholder')
    google_place_id = models.CharField(max_length=255, blank=True, default='')

    socials = models.JSONField(default=default_socials, blank=True)
    announcement = models.TextField(blank=True, default='')
    admin_password = models.CharField(max_length=255)

    HIDDEN_FIELDS = ('key', 'admin_password')

    class Meta:
        verbose_name = 'site configuration'

    def __str__(self) -> str:
        return f"{self.name} ({self.key})"


class Content(Document):
    """A polymorphic content item: service, faq, testimonial or doctor.

    ``data`` holds the type specific payload; its shape is validated at
    the API boundary by :mod:`clinic.serializers.content`.
    """
    TYPE_SERVICE = 'service'
    TYPE_FAQ = 'faq'
    TYPE_TESTIMONIAL = 'testimonial'
    TYPE_DOCTOR = 'doctor'
    TYPE_CHOICES = [
        (TYPE_SERVICE, 'Service'),
        (TYPE_FAQ, 'FAQ'),
        (TYPE_TESTIMONIAL, 'Testimonial'),
        (TYPE_DOCTOR, 'Doctor'),
    ]

    type = models.CharField(max_length=16, choices=TYPE_CHOICES, db_index=True)
    data = models.JSONField()
    order = models.IntegerField(default=0)

    class Meta:
        ordering = ['order', '-created_at']

    def __str__(self) -> str:
        return f"{self.type} #{self.id}"


class GalleryItem(Document):
    CATEGORY_CHOICES = [
        ('clinic', 'Clinic'),
        ('events', 'Events'),
        ('patients', 'Patients'),
        ('surgery', 'Surgery'),
        ('videos', 'Videos'),
    ]
    TYPE_IMAGE = 'image'
    TYPE_VIDEO = 'video'
    TYPE_REEL = 'reel'
    TYPE_CHOICES = [
        (TYPE_IMAGE, 'Image'),
        (TYPE_VIDEO, 'Video'),
        (TYPE_REEL, 'Reel'),
    ]
    # Items of these types are external links and never hosted by us.
    LINK_TYPES = (TYPE_VIDEO, TYPE_REEL)

    url = models.CharField(max_length=1024)
    public_id = models.CharField(max_length=255, blank=True, null=True)
    title = models.CharField(max_length=255)
    category = models.CharField(max_length=16, choices=CATEGORY_CHOICES, default='clinic')
    type = models.CharField(max_length=8, choices=TYPE_CHOICES, default=TYPE_IMAGE)
    featured = models.BooleanField(default=False, db_index=True)

    HIDDEN_FIELDS = ('public_id',)

    class Meta:
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.title} ({self.type})"


class HeroSlide(Document):
    image = models.CharField(max_length=1024)
    public_id = models.CharField(max_length=255, blank=True, null=True)
    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=512)

    HIDDEN_FIELDS = ('public_id',)

    class Meta:
        ordering = ['created_at']

    def __str__(self) -> str:
        return self.title
