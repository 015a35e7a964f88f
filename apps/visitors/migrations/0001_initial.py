import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Visit",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "timestamp",
                    models.DateTimeField(
                        db_index=True,
                        default=django.utils.timezone.now,
                        editable=False,
                        verbose_name="time of visit",
                    ),
                ),
                (
                    "client_identifier",
                    models.CharField(
                        blank=True,
                        editable=False,
                        help_text="Forwarded or remote address of the visitor, stored as sent.",
                        max_length=100,
                        verbose_name="client identifier",
                    ),
                ),
            ],
            options={
                "verbose_name": "Visit",
                "verbose_name_plural": "Visits",
                "ordering": ["-timestamp", "-pk"],
            },
        ),
    ]
