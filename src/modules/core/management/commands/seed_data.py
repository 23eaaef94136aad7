from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.customers.dtos import AddressDTO, CreateCustomerDTO, PhoneDTO
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.products.models import Product

MENU = {
    ("Uramaki", "Inside-out rolls"): [
        ("California Roll", Decimal("32.90")),
        ("Philadelphia Roll", Decimal("36.90")),
        ("Ebi Furai Roll", Decimal("39.90")),
    ],
    ("Nigiri", "Rice topped with fish"): [
        ("Salmon Nigiri", Decimal("18.90")),
        ("Tuna Nigiri", Decimal("21.90")),
    ],
    ("Temaki", "Hand rolls"): [
        ("Salmon Temaki", Decimal("29.90")),
        ("Skin Temaki", Decimal("24.90")),
    ],
    ("Hot", None): [
        ("Hot Philadelphia", Decimal("34.90")),
        ("Gyoza", Decimal("27.90")),
    ],
}

CUSTOMERS = [
    ("Isabel Martins", "isabel@gmail.com", "11987654321", ("10", "Rua Augusta", "Consolação")),
    ("Marcos Tanaka", "marcos@example.com", "11912345678", ("245", "Rua Galvão Bueno", "Liberdade")),
    ("Mariana Costa", "mariana@example.com", "21998877665", ("8", "Rua do Catete", "Catete")),
]


class Command(BaseCommand):
    help = "Seed database with a sushi menu, customers and API users."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products = self._seed_menu()
        customers = self._seed_customers()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={products}, "
                f"customers={customers}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_menu(self) -> int:
        self.stdout.write("Creating menu...")
        count = 0
        for (category_name, description), items in MENU.items():
            category, _ = Category.objects.get_or_create(
                name=category_name, defaults={"description": description}
            )
            for name, price in items:
                product, _ = Product.objects.get_or_create(
                    name=name, defaults={"price": price}
                )
                product.categories.add(category)
                count += 1
        self.stdout.write(self.style.SUCCESS("Creating menu... Done!"))
        return count

    def _seed_customers(self) -> int:
        self.stdout.write("Creating customers...")
        service = CustomerService(repository=CustomerDjangoRepository())
        for name, email, phone, (number, street, neighborhood) in CUSTOMERS:
            dto = CreateCustomerDTO(
                name=name,
                email=email,
                password="sushi123",
                phone=PhoneDTO(number=phone),
                addresses=[
                    AddressDTO(number=number, street=street, neighborhood=neighborhood)
                ],
            )
            try:
                service.create_customer(dto)
            except CustomerAlreadyExists:
                self.stdout.write(self.style.WARNING(f"Skipping {email} (exists)."))
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return Customer.objects.count()
