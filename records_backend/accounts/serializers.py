# accounts/serializers.py
from rest_framework import serializers

from .exceptions import AccountError, ParseError
from .models import Account, AdminAccount, parse_birthdate


class AccountSerializer(serializers.ModelSerializer):
    # derived from the record; the date they are computed against comes from context['today']
    age = serializers.SerializerMethodField()
    about_me = serializers.SerializerMethodField()

    class Meta:
        model = Account
        fields = ['id', 'username', 'email', 'bio', 'birthdate', 'first_name', 'last_name', 'age', 'about_me']

    def validate_birthdate(self, value):
        if value is None or value == '':
            return value
        try:
            parse_birthdate(value)
        except ParseError as exc:
            raise serializers.ValidationError(str(exc))
        return value

    def get_age(self, obj):
        try:
            return obj.age(self.context.get('today'))
        except ParseError:
            return None

    def get_about_me(self, obj):
        try:
            return obj.about_me(self.context.get('today'))
        except AccountError:
            return None


class AdminAccountSerializer(AccountSerializer):
    class Meta(AccountSerializer.Meta):
        model = AdminAccount
        fields = AccountSerializer.Meta.fields + ['password']
        extra_kwargs = {'password': {'write_only': True}}
