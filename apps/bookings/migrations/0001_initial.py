from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tracking_number", models.CharField(editable=False, max_length=50, unique=True)),
                ("sender_name", models.CharField(max_length=255)),
                ("sender_company", models.CharField(blank=True, max_length=255, null=True)),
                ("sender_phone", models.CharField(max_length=50)),
                ("sender_email", models.EmailField(max_length=255)),
                ("sender_address", models.TextField()),
                ("receiver_name", models.CharField(max_length=255)),
                ("receiver_phone", models.CharField(max_length=50)),
                ("receiver_address", models.TextField()),
                ("receiver_country", models.CharField(max_length=100)),
                (
                    "shipment_type",
                    models.CharField(
                        choices=[
                            ("Air Freight", "Air Freight"),
                            ("Sea Freight", "Sea Freight"),
                            ("Land Transport", "Land Transport"),
                        ],
                        max_length=50,
                    ),
                ),
                (
                    "weight",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.1"))],
                    ),
                ),
                ("dimensions", models.CharField(blank=True, max_length=100, null=True)),
                ("cargo_type", models.CharField(max_length=100)),
                ("pickup_date", models.DateField()),
                (
                    "delivery_priority",
                    models.CharField(
                        choices=[("Standard", "Standard"), ("Express", "Express"), ("Urgent", "Urgent")],
                        max_length=20,
                    ),
                ),
                ("estimated_delivery", models.DateField(blank=True, null=True)),
                ("special_instructions", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Booked", "Booked"),
                            ("Processing", "Processing"),
                            ("In Transit", "In Transit"),
                            ("At Warehouse", "At Warehouse"),
                            ("Out for Delivery", "Out for Delivery"),
                            ("Delivered", "Delivered"),
                        ],
                        default="Booked",
                        max_length=50,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "db_table": "bookings",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["tracking_number"], name="idx_bookings_tracking"),
                    models.Index(fields=["status"], name="idx_bookings_status"),
                    models.Index(fields=["created_at"], name="idx_bookings_created"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("shipment_type__in", ["Air Freight", "Sea Freight", "Land Transport"])),
                        name="bookings_shipment_type_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("delivery_priority__in", ["Standard", "Express", "Urgent"])),
                        name="bookings_priority_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            (
                                "status__in",
                                [
                                    "Booked",
                                    "Processing",
                                    "In Transit",
                                    "At Warehouse",
                                    "Out for Delivery",
                                    "Delivered",
                                ],
                            )
                        ),
                        name="bookings_status_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("weight__gt", 0)),
                        name="bookings_weight_positive",
                    ),
                ],
            },
        ),
    ]
