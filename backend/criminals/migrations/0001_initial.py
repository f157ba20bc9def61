from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Criminal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, verbose_name="Name")),
                ("alias", models.CharField(blank=True, max_length=100, null=True, verbose_name="Alias")),
                ("dob", models.DateField(blank=True, null=True, verbose_name="Date of Birth")),
                (
                    "gender",
                    models.CharField(
                        choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")],
                        max_length=10,
                        verbose_name="Gender",
                    ),
                ),
                ("address", models.TextField(blank=True, null=True, verbose_name="Address")),
                ("height_cm", models.PositiveIntegerField(blank=True, null=True, verbose_name="Height (cm)")),
                ("weight_kg", models.PositiveIntegerField(blank=True, null=True, verbose_name="Weight (kg)")),
                ("identifying_marks", models.TextField(blank=True, null=True, verbose_name="Identifying Marks")),
                ("is_wanted", models.BooleanField(db_index=True, default=False, verbose_name="Wanted")),
                ("total_cases", models.PositiveIntegerField(default=0, verbose_name="Total Cases")),
            ],
            options={
                "verbose_name": "Criminal",
                "verbose_name_plural": "Criminals",
                "ordering": ["-id"],
            },
        ),
    ]
