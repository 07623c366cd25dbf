from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from barbershops.models import Barbershop, BarbershopService

SAMPLE_IMAGE_URL = "https://utfs.io/f/c97a2dc9-cf62-468b-a851-bfd2bdde775f-16p.png"

SAMPLE_BARBERSHOPS = [
    ("Barbearia Vintage", "Rua da Barbearia, 123"),
    ("Corte & Estilo", "Avenida dos Cortes, 456"),
    ("Barba & Navalha", "Praça da Barba, 789"),
    ("The Dapper Den", "Travessa da Navalha, 101"),
    ("Cabelo & Cia.", "Alameda dos Estilos, 202"),
    ("Machado & Tesoura", "Estrada do Machado, 303"),
    ("Barbearia Elegance", "Rua Elegante, 404"),
    ("Aparência Impecável", "Avenida Impecável, 505"),
    ("Estilo Urbano", "Rua Urbana, 606"),
    ("Estilo Clássico", "Avenida Clássica, 707"),
]

SERVICES = [
    # name, description, price
    ("Corte de Cabelo", "Estilo personalizado com as últimas tendências.", Decimal("60.00")),
    ("Barba", "Modelagem completa para destacar sua masculinidade.", Decimal("40.00")),
    ("Pézinho", "Acabamento perfeito para um visual renovado.", Decimal("35.00")),
    ("Sobrancelha", "Expressão acentuada com modelagem precisa.", Decimal("20.00")),
    ("Massagem", "Relaxe com uma massagem revigorante.", Decimal("50.00")),
    ("Hidratação", "Hidratação profunda para cabelo e barba.", Decimal("25.00")),
]


class Command(BaseCommand):
    help = 'Create sample barbershops and their services'

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Creating sample barbershops...')

        created_count = 0
        for name, address in SAMPLE_BARBERSHOPS:
            barbershop, created = Barbershop.objects.get_or_create(
                name=name,
                defaults={
                    'address': address,
                    'image_url': SAMPLE_IMAGE_URL,
                    'phones': ['(11) 99999-9999', '(11) 99999-9999'],
                    'description': (
                        'Lorem ipsum dolor sit amet, consectetur adipiscing elit. '
                        'Pellentesque ac augue ullamcorper, pharetra orci mollis, auctor tellus.'
                    ),
                }
            )
            if not created:
                continue

            created_count += 1
            for service_name, description, price in SERVICES:
                BarbershopService.objects.create(
                    barbershop=barbershop,
                    name=service_name,
                    description=description,
                    price=price,
                    image_url=SAMPLE_IMAGE_URL,
                )
            self.stdout.write(
                self.style.SUCCESS(f'Created barbershop: {barbershop.name}')
            )

        self.stdout.write(
            self.style.SUCCESS(f'Successfully created {created_count} barbershops!')
        )
