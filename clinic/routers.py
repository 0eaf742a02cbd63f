"""
URL mappings for the clinic website API.

Every endpoint lives under ``/api``.  Trailing slashes are deliberately
omitted to match the front-end calls.  Paths with an ``<str:...>`` id
accept the 24 character document id; blog paths also accept a slug.
"""
from django.urls import path, include

from .views import health
from .views.appointments import appointments, appointment_detail
from .views.blogs import blogs, blog_detail
from .views.config import config, config_login, config_password
from .views.content import content, content_detail
from .views.gallery import gallery, gallery_detail, gallery_feature
from .views.hero import hero, hero_detail
from .views.upload import upload


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Generic upload
    path('api/upload', upload, name='upload'),
    # Appointments
    path('api/appointments', appointments, name='appointments'),
    path('api/appointments/<str:pk>', appointment_detail, name='appointment-detail'),
    # Gallery
    path('api/gallery', gallery, name='gallery'),
    path('api/gallery/<str:pk>', gallery_detail, name='gallery-detail'),
    path('api/gallery/<str:pk>/feature', gallery_feature, name='gallery-feature'),
    # Hero slides
    path('api/hero', hero, name='hero'),
    path('api/hero/<str:pk>', hero_detail, name='hero-detail'),
    # Site configuration & admin auth
    path('api/config', config, name='config'),
    path('api/config/login', config_login, name='config-login'),
    path('api/config/password', config_password, name='config-password'),
    # Content (services, FAQs, testimonials, doctors)
    path('api/content', content, name='content'),
    path('api/content/<str:pk>', content_detail, name='content-detail'),
    # Blogs
    path('api/blogs', blogs, name='blogs'),
    path('api/blogs/<str:key>', blog_detail, name='blog-detail'),
]
