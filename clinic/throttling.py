from rest_framework.permissions import SAFE_METHODS
from rest_framework.throttling import ScopedRateThrottle


class WriteScopedRateThrottle(ScopedRateThrottle):
    """``ScopedRateThrottle`` that only counts unsafe methods.

    Lets a public submission endpoint be rate limited without the admin
    listing on the same URL using up the visitors' budget.
    """
    def allow_request(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().allow_request(request, view)
