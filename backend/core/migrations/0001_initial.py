import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AuditLogEntry",
            fields=[
                ("log_id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("LOGIN", "Login"),
                            ("CREATE", "Create"),
                            ("UPDATE", "Update"),
                            ("LINK", "Link"),
                            ("DEACTIVATE", "Deactivate"),
                        ],
                        max_length=20,
                        verbose_name="Action",
                    ),
                ),
                ("table_name", models.CharField(max_length=50, verbose_name="Table")),
                ("record_id", models.BigIntegerField(blank=True, null=True, verbose_name="Record ID")),
                ("timestamp", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Timestamp")),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="audit_entries",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "verbose_name": "Audit Log Entry",
                "verbose_name_plural": "Audit Log",
                "ordering": ["-timestamp", "-log_id"],
            },
        ),
    ]
