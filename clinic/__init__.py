"""Clinic website application.

This package contains models, serializers, services, views and route
registrations for the clinic's public site and admin portal API, plus
:mod:`clinic.client`, the Python data layer used to call that API.
"""
