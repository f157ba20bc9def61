import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("criminals", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CrimeCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("crime_name", models.CharField(max_length=100, unique=True, verbose_name="Crime")),
                ("ipc_section", models.CharField(blank=True, max_length=20, null=True, verbose_name="IPC Section")),
                (
                    "severity_level",
                    models.CharField(
                        choices=[("Low", "Low"), ("Medium", "Medium"), ("High", "High"), ("Critical", "Critical")],
                        default="Medium",
                        max_length=10,
                        verbose_name="Severity",
                    ),
                ),
            ],
            options={
                "verbose_name": "Crime Category",
                "verbose_name_plural": "Crime Categories",
                "ordering": ["crime_name"],
            },
        ),
        migrations.CreateModel(
            name="Case",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fir_number", models.CharField(max_length=50, unique=True, verbose_name="FIR Number")),
                ("city", models.CharField(blank=True, max_length=100, null=True, verbose_name="City")),
                ("district", models.CharField(blank=True, max_length=100, null=True, verbose_name="District")),
                (
                    "police_station_code",
                    models.CharField(blank=True, max_length=30, null=True, verbose_name="Police Station Code"),
                ),
                (
                    "latitude",
                    models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True, verbose_name="Latitude"),
                ),
                (
                    "longitude",
                    models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True, verbose_name="Longitude"),
                ),
                ("description", models.TextField(blank=True, null=True, verbose_name="Description")),
                ("date_reported", models.DateField(db_index=True, verbose_name="Date Reported")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Open", "Open"),
                            ("Under Investigation", "Under Investigation"),
                            ("Closed", "Closed"),
                            ("Chargesheeted", "Chargesheeted"),
                        ],
                        db_index=True,
                        default="Open",
                        max_length=30,
                        verbose_name="Status",
                    ),
                ),
                (
                    "crime_type",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="cases",
                        to="cases.crimecategory",
                        verbose_name="Crime Type",
                    ),
                ),
                (
                    "primary_accused",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="accused_in_cases",
                        to="criminals.criminal",
                        verbose_name="Primary Accused",
                    ),
                ),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "ordering": ["-date_reported", "-id"],
            },
        ),
        migrations.CreateModel(
            name="FIR",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fir_number", models.CharField(max_length=50, unique=True, verbose_name="FIR Number")),
                ("complainant_name", models.CharField(max_length=100, verbose_name="Complainant")),
                (
                    "complainant_contact",
                    models.CharField(blank=True, max_length=30, null=True, verbose_name="Complainant Contact"),
                ),
                ("complainant_address", models.TextField(blank=True, null=True, verbose_name="Complainant Address")),
                (
                    "place_of_offence",
                    models.CharField(blank=True, max_length=255, null=True, verbose_name="Place of Offence"),
                ),
                (
                    "police_station",
                    models.CharField(blank=True, max_length=100, null=True, verbose_name="Police Station"),
                ),
                ("date_filed", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Date Filed")),
                (
                    "case",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="fir",
                        to="cases.case",
                        verbose_name="Case",
                    ),
                ),
            ],
            options={
                "verbose_name": "FIR",
                "verbose_name_plural": "FIRs",
                "ordering": ["-date_filed"],
            },
        ),
    ]
