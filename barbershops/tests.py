import uuid
from decimal import Decimal
from io import StringIO

from django.contrib import admin
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse

from .management.commands.seed_barbershops import SAMPLE_BARBERSHOPS, SERVICES
from .models import Barbershop, BarbershopService


class BarbershopModelTests(TestCase):

    def test_ids_are_generated_and_unique(self):
        first = Barbershop.objects.create(name="Alpha", address="Rua A", image_url="https://example.com/a.png")
        second = Barbershop.objects.create(name="Alpha", address="Rua B", image_url="https://example.com/b.png")

        self.assertIsInstance(first.pk, uuid.UUID)
        self.assertNotEqual(first.pk, second.pk)
        self.assertEqual(first.phones, [])
        self.assertEqual(str(first), "Alpha")

    def test_absolute_url(self):
        shop = Barbershop.objects.create(name="Alpha", address="Rua A", image_url="https://example.com/a.png")
        self.assertEqual(shop.get_absolute_url(), f"/barbershops/{shop.pk}/")

    def test_services_are_deleted_with_barbershop(self):
        shop = Barbershop.objects.create(name="Alpha", address="Rua A", image_url="https://example.com/a.png")
        BarbershopService.objects.create(
            barbershop=shop, name="Barba", price=Decimal("40.00"), image_url="https://example.com/s.png",
        )
        shop.delete()
        self.assertFalse(BarbershopService.objects.exists())


class BarbershopDetailViewTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.shop = Barbershop.objects.create(
            name="Barbearia Vintage",
            address="Rua da Barbearia, 123",
            image_url="https://example.com/vintage.png",
            phones=["(11) 98765-4321"],
            description="Tradição desde 1990.",
        )
        for name, price in [("Corte de Cabelo", "60.00"), ("Barba", "40.00")]:
            BarbershopService.objects.create(
                barbershop=cls.shop,
                name=name,
                description=f"{name} completo",
                price=Decimal(price),
                image_url="https://example.com/service.png",
            )

    def test_detail_page(self):
        response = self.client.get(reverse('barbershops:detail', args=[self.shop.pk]))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'barbershops/detail.html')
        self.assertContains(response, "Barbearia Vintage")
        self.assertContains(response, "Rua da Barbearia, 123")
        self.assertContains(response, "(11) 98765-4321")
        self.assertEqual(
            [service.name for service in response.context['services']],
            ["Barba", "Corte de Cabelo"],
        )

    def test_unknown_barbershop_is_404(self):
        response = self.client.get(reverse('barbershops:detail', args=[uuid.uuid4()]))
        self.assertEqual(response.status_code, 404)

    def test_barbershop_without_services(self):
        shop = Barbershop.objects.create(name="Vazia", address="Rua C", image_url="https://example.com/c.png")
        response = self.client.get(shop.get_absolute_url())
        self.assertContains(response, "Nenhum serviço cadastrado.")


class SeedBarbershopsCommandTests(TestCase):

    def test_creates_sample_data(self):
        out = StringIO()
        call_command('seed_barbershops', stdout=out)

        self.assertEqual(Barbershop.objects.count(), len(SAMPLE_BARBERSHOPS))
        self.assertEqual(
            BarbershopService.objects.count(),
            len(SAMPLE_BARBERSHOPS) * len(SERVICES),
        )
        self.assertIn(f"Successfully created {len(SAMPLE_BARBERSHOPS)} barbershops!", out.getvalue())

    def test_is_idempotent(self):
        call_command('seed_barbershops', stdout=StringIO())
        out = StringIO()
        call_command('seed_barbershops', stdout=out)

        self.assertEqual(Barbershop.objects.count(), len(SAMPLE_BARBERSHOPS))
        self.assertIn("Successfully created 0 barbershops!", out.getvalue())


class BarbershopAdminTests(TestCase):

    def test_models_are_registered(self):
        self.assertTrue(admin.site.is_registered(Barbershop))
        self.assertTrue(admin.site.is_registered(BarbershopService))
