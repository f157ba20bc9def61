"""
Criminals app models.

A ``Criminal`` is a person-of-record: a suspect or convict with
identifying details.  Cases point at a criminal through
``Case.primary_accused``; the criminal side only keeps a counter.
"""

from django.db import models


class Gender(models.TextChoices):
    MALE = "Male", "Male"
    FEMALE = "Female", "Female"
    OTHER = "Other", "Other"


class Criminal(models.Model):
    """
    Criminal record.

    ``total_cases`` counts the cases this record is primary accused on.
    It is bumped when a brand-new record is linked to a case at creation
    time; nothing else writes it.
    """

    name = models.CharField(max_length=100, verbose_name="Name")
    alias = models.CharField(max_length=100, blank=True, null=True, verbose_name="Alias")
    dob = models.DateField(null=True, blank=True, verbose_name="Date of Birth")
    gender = models.CharField(
        max_length=10,
        choices=Gender.choices,
        verbose_name="Gender",
    )
    address = models.TextField(blank=True, null=True, verbose_name="Address")
    height_cm = models.PositiveIntegerField(null=True, blank=True, verbose_name="Height (cm)")
    weight_kg = models.PositiveIntegerField(null=True, blank=True, verbose_name="Weight (kg)")
    identifying_marks = models.TextField(
        blank=True,
        null=True,
        verbose_name="Identifying Marks",
    )
    is_wanted = models.BooleanField(default=False, db_index=True, verbose_name="Wanted")
    total_cases = models.PositiveIntegerField(default=0, verbose_name="Total Cases")

    class Meta:
        verbose_name = "Criminal"
        verbose_name_plural = "Criminals"
        ordering = ["-id"]

    def __str__(self):
        if self.alias:
            return f"{self.name} (alias {self.alias})"
        return self.name
