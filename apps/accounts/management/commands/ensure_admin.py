"""Create or refresh the panel administrator from ADMIN_USER / ADMIN_PASS."""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

User = get_user_model()


class Command(BaseCommand):
    help = "Creates the administrator account, or resets its password, from settings"

    def handle(self, *args, **options):
        username = settings.ADMIN_USER
        password = settings.ADMIN_PASS
        if not username or not password:
            raise CommandError("ADMIN_USER and ADMIN_PASS must both be set")

        user, created = User.objects.get_or_create(username=username)
        user.is_staff = True
        user.is_superuser = True
        user.is_active = True
        user.set_password(password)
        user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created administrator {username}"))
        else:
            self.stdout.write(f"Updated administrator {username}")
