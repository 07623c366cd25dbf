import uuid

from django.db import models
from django.urls import reverse

from core.models import TimeStampedModel


class Barbershop(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    phones = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500)

    class Meta:
        verbose_name = 'Barbearia'
        verbose_name_plural = 'Barbearias'

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('barbershops:detail', args=[self.pk])


class BarbershopService(TimeStampedModel):
    barbershop = models.ForeignKey(Barbershop, on_delete=models.CASCADE, related_name='services')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        verbose_name = 'Serviço'
        verbose_name_plural = 'Serviços'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.barbershop.name})"
