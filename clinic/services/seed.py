"""
Starter content for an empty site.
"""
import logging

from django.db import transaction

from clinic.models import Content

logger = logging.getLogger(__name__)

INITIAL_CONTENT = [
    # Services
    {'type': 'service', 'data': {
        'id': 'ivf', 'title': 'Advanced IVF',
        'description': 'Advanced In-Vitro Fertilization offering high success rates.',
        'icon': 'TestTube2', 'details': ['Blastocyst Culture', 'Personalized Protocol'],
    }},
    {'type': 'service', 'data': {
        'id': 'delivery', 'title': 'Painless Delivery',
        'description': 'Expert management of Painless Normal Delivery & C-sections.',
        'icon': 'Baby', 'details': ['Epidural Analgesia', 'Emergency C-Section'],
    }},
    {'type': 'service', 'data': {
        'id': 'laparoscopy', 'title': '3D Laparoscopy',
        'description': 'Minimally invasive surgery with depth perception.',
        'icon': 'Activity', 'details': ['Minimal Scarring', 'Quick Recovery'],
    }},
    # FAQs
    {'type': 'faq', 'data': {
        'question': 'When is IVF needed?',
        'answer': 'IVF is needed when a couple is unable to conceive after a year of trying.',
    }},
    {'type': 'faq', 'data': {
        'question': 'Is IVF painful?',
        'answer': 'Modern IVF is generally well-managed and not very painful.',
    }},
    # Testimonials
    {'type': 'testimonial', 'data': {
        'id': '1', 'name': 'Manju Sharma', 'rating': 5, 'type': 'text',
        'text': 'Dr sonil is one of best doctor I have ever met. She delivered our baby normally and painlessly.',
    }},
    # Doctors
    {'type': 'doctor', 'data': {
        'name': 'Dr. Sonil Srivastava', 'role': 'IVF Specialist',
        'specialties': ['IVF', 'High-Risk Pregnancy'],
        'qualifications': ['MBBS & MS (Gold Medalist)'],
        'image': 'https://images.unsplash.com/photo-1559839734-2b71ea197ec2?q=80&w=800',
        'socials': {'instagram': ''}, 'achievements': [],
    }},
]


def seed_content() -> int:
    """Insert the starter content if the collection is empty; return how many rows were added."""
    with transaction.atomic():
        if Content.objects.exists():
            return 0
        items = [Content(type=row['type'], data=row['data']) for row in INITIAL_CONTENT]
        for item in items:
            item.full_clean(validate_unique=False)
        Content.objects.bulk_create(items)
    logger.info('seeded %d starter content items', len(items))
    return len(items)
