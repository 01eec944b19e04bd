# accounts/models.py
import datetime
import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.dateparse import parse_date

from .exceptions import MissingFieldError, ParseError

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


def parse_birthdate(value):
    if value is None or value == '':
        raise ParseError("birthdate is not set", value)
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        parsed = parse_date(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"birthdate {value!r} is not a valid date", value) from exc
    if parsed is None:
        raise ParseError(f"birthdate {value!r} is not a valid date", value)
    return parsed


def _is_blank(value):
    return value is None or value == ''


class Account(models.Model):
    username = models.CharField(max_length=150, null=True, blank=True)
    email = models.CharField(max_length=254, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)
    # kept as text; parsed on demand by age()
    birthdate = models.CharField(max_length=32, null=True, blank=True)
    first_name = models.CharField(max_length=150, null=True, blank=True)
    last_name = models.CharField(max_length=150, null=True, blank=True)

    class Meta:
        db_table = "accounts"

    def __str__(self):
        return self.username or "<unnamed account>"

    @classmethod
    def parse(cls, data):
        """
        Build an unsaved record from a mapping of field names to values.
        Keys that are not fields of this model are ignored.
        """
        field_names = {f.name for f in cls._meta.concrete_fields if not f.primary_key}
        record = cls()
        for key, value in data.items():
            if key in field_names:
                setattr(record, key, value)
            else:
                logger.debug(f"{cls.__name__}.parse ignoring unknown key {key!r}")
        return record

    def clean(self):
        super().clean()
        if not _is_blank(self.birthdate):
            try:
                parse_birthdate(self.birthdate)
            except ParseError as exc:
                raise ValidationError({'birthdate': str(exc)})

    def full_name(self):
        missing = [name for name in ('first_name', 'last_name') if _is_blank(getattr(self, name))]
        if missing:
            raise MissingFieldError(missing)
        return f"{self.first_name} {self.last_name}"

    def age(self, today=None):
        """
        Whole years since birthdate, counting a year as 365 days.

        `today` defaults to the current local date.
        """
        born = parse_birthdate(self.birthdate)
        if today is None:
            today = timezone.localdate()
        elif isinstance(today, datetime.datetime):
            today = timezone.localdate(today) if timezone.is_aware(today) else today.date()
        elapsed = today - born
        return int(elapsed.days / DAYS_PER_YEAR)

    def about_me(self, today=None):
        missing = [name for name in ('username', 'bio', 'email', 'birthdate') if _is_blank(getattr(self, name))]
        if missing:
            raise MissingFieldError(missing)
        return f"{self.username.lower()} ({self.age(today)}): {self.bio}. Reach me at: {self.email}"


class AdminAccount(Account):
    password = models.CharField(max_length=128, null=True, blank=True)

    class Meta:
        db_table = "admin_accounts"
