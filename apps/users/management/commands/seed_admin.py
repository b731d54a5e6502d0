"""Create or update an administrator account."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

User = get_user_model()


class Command(BaseCommand):
    help = "Creates an administrator account, or resets the password and role of an existing one"

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--name", default="Administrator")

    def handle(self, *args, **options):
        email = User.objects.normalize_email(options["email"])
        password = options["password"]

        if len(password) < 6:
            raise CommandError("Password must be at least 6 characters long")

        user = User.objects.filter(email=email).first()
        if user is None:
            User.objects.create_superuser(email=email, password=password, name=options["name"])
            self.stdout.write(self.style.SUCCESS(f"Administrator {email} created"))
            return

        user.set_password(password)
        user.save(update_fields=["password", "updated_at"])
        if user.role != User.Role.ADMIN:
            user.change_role(User.Role.ADMIN)
        self.stdout.write(self.style.WARNING(f"User {email} already existed, password and role updated"))
