"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders the aggregate.  Input parsing goes through the Pydantic DTOs
in ``dtos.py``; the password hash is never rendered.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Address, Customer, Phone


class PhoneSerializer(serializers.ModelSerializer):
    class Meta:
        model = Phone
        fields = ["id", "number"]


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ["id", "number", "street", "neighborhood"]


class CustomerSerializer(serializers.ModelSerializer):
    """Read-only serializer for the Customer aggregate."""

    phone = PhoneSerializer(source="current_phone", read_only=True, allow_null=True)
    addresses = AddressSerializer(source="address_list", many=True, read_only=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "addresses",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
