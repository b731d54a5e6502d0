"""Contact form message model."""

from __future__ import annotations

from django.db import models  # type: ignore


class ContactMessage(models.Model):
    """A message left through the public contact form."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=50, null=True, blank=True)
    subject = models.CharField(max_length=255, null=True, blank=True)
    message = models.TextField()
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "contact_messages"
        verbose_name = "Contact message"
        verbose_name_plural = "Contact messages"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_read"], name="idx_contact_is_read"),
            models.Index(fields=["created_at"], name="idx_contact_created"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>: {self.subject or 'no subject'}"

    def save(self, *args, **kwargs):  # type: ignore
        self.email = (self.email or "").lower()
        super().save(*args, **kwargs)
