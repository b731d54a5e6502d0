"""FilterSet for the back-office booking list."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Exact status match plus a free-text search over the identifying columns."""

    # Plain CharFilter so an unknown status yields an empty page instead of being ignored
    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Booking
        fields = ["status"]

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(
            Q(tracking_number__icontains=value)
            | Q(sender_name__icontains=value)
            | Q(receiver_name__icontains=value)
        )
