"""Spot persistence models.

These models handle database concerns. The immutable domain view of a
spot lives in ``apps.spots.domain.entities``; stores convert between them.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Spot(models.Model):
    """A rentable listing owned by a host."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="spots",
    )
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    lat = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        validators=[MinValueValidator(Decimal("-90")), MaxValueValidator(Decimal("90"))],
    )
    lng = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        validators=[MinValueValidator(Decimal("-180")), MaxValueValidator(Decimal("180"))],
    )
    name = models.CharField(max_length=50, validators=[MinLengthValidator(1)])
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text=_("Nightly price."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Spot")
        verbose_name_plural = _("Spots")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="spot_price_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["lat", "lng"], name="spot_lat_lng_idx"),
            models.Index(fields=["price"], name="spot_price_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class SpotImage(models.Model):
    """An image attached to a spot; at most one should be the preview."""

    spot = models.ForeignKey(Spot, on_delete=models.CASCADE, related_name="images")
    url = models.URLField(max_length=500)
    preview = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Spot image")
        verbose_name_plural = _("Spot images")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["spot", "preview"], name="spotimage_spot_preview_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.spot_id}: {self.url}"
