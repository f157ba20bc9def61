"""
Move ``[Status: X]`` prefixes out of ``progress_notes`` into ``status``.

Rows imported from the old schema carry their status inside the notes
text.  ``last_updated`` is preserved by writing through ``update()``.
"""

from django.db import migrations

from investigations.models import split_legacy_status


def forwards(apps, schema_editor):
    Investigation = apps.get_model("investigations", "Investigation")
    rows = Investigation.objects.filter(progress_notes__startswith="[Status:")
    for investigation in rows.only("pk", "progress_notes").iterator():
        status, notes = split_legacy_status(investigation.progress_notes)
        if status is None:
            continue
        Investigation.objects.filter(pk=investigation.pk).update(
            status=status,
            progress_notes=notes,
        )


def backwards(apps, schema_editor):
    Investigation = apps.get_model("investigations", "Investigation")
    for investigation in Investigation.objects.only("pk", "status", "progress_notes").iterator():
        if investigation.status == "Open":
            continue
        notes = f"[Status: {investigation.status}] {investigation.progress_notes or ''}".strip()
        Investigation.objects.filter(pk=investigation.pk).update(progress_notes=notes)


class Migration(migrations.Migration):

    dependencies = [
        ("investigations", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(forwards, backwards),
    ]
