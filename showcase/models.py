import logging

from django.core.exceptions import ValidationError
from django.db import models

from record_decorator.models import DecoratableModel

logger = logging.getLogger(__name__)


class BalloonSize(models.TextChoices):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Balloon(DecoratableModel):
    id = models.BigAutoField(primary_key=True)
    color = models.CharField(max_length=255)
    size = models.CharField(max_length=255)

    def clean(self):
        if self.color == 'black':
            raise ValidationError({'color': 'is too dark'})

    def __str__(self):
        return f"ID: {self.id}, COLOR: {self.color}, SIZE: {self.size}"


class Ribbon(DecoratableModel):
    id = models.BigAutoField(primary_key=True)
    balloon = models.ForeignKey(Balloon, on_delete=models.CASCADE, related_name='ribbons')
    length = models.PositiveIntegerField(default=1)

    def __str__(self):
        return f"ID: {self.id}, BALLOON: {self.balloon_id}, LENGTH: {self.length}"
