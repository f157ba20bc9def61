import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Investigation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Open", "Open"),
                            ("In Progress", "In Progress"),
                            ("Suspended", "Suspended"),
                            ("Closed", "Closed"),
                        ],
                        db_index=True,
                        default="Open",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("progress_notes", models.TextField(blank=True, null=True, verbose_name="Progress Notes")),
                ("last_updated", models.DateTimeField(auto_now=True, verbose_name="Last Updated")),
                (
                    "assigned_to",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="investigations",
                        to="accounts.staff",
                        verbose_name="Assigned Officer",
                    ),
                ),
                (
                    "case",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="investigation",
                        to="cases.case",
                        verbose_name="Case",
                    ),
                ),
            ],
            options={
                "verbose_name": "Investigation",
                "verbose_name_plural": "Investigations",
                "ordering": ["-last_updated"],
            },
        ),
    ]
