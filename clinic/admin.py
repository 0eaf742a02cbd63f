"""
Django admin registrations for the clinic models.

Useful during development to inspect documents created through the
API.  The site configuration's password hash is read-only here; use the
``reset_admin_password`` command or the API to change it.
"""

from django.contrib import admin

from .models import Appointment, BlogPost, Content, GalleryItem, HeroSlide, SiteConfig


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_name', 'phone', 'department', 'date', 'status', 'created_at')
    list_filter = ('status', 'department')
    search_fields = ('patient_name', 'phone')


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'slug', 'author', 'created_at')
    search_fields = ('title', 'slug')
    readonly_fields = ('public_id',)


@admin.register(SiteConfig)
class SiteConfigAdmin(admin.ModelAdmin):
    list_display = ('key', 'name', 'phone', 'email', 'updated_at')
    readonly_fields = ('key', 'admin_password')


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    list_display = ('id', 'type', 'order', 'created_at')
    list_filter = ('type',)


@admin.register(GalleryItem)
class GalleryItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'type', 'featured', 'created_at')
    list_filter = ('category', 'type', 'featured')
    search_fields = ('title',)


@admin.register(HeroSlide)
class HeroSlideAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'subtitle', 'created_at')
