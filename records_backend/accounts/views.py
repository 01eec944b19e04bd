# accounts/views.py
import logging

from django.shortcuts import get_object_or_404
from django.utils.dateparse import parse_date
from rest_framework import serializers, status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .exceptions import AccountError
from .models import Account, AdminAccount
from .serializers import AccountSerializer, AdminAccountSerializer

logger = logging.getLogger(__name__)


def requested_today(request):
    """
    The date derived fields are computed against: ?today=YYYY-MM-DD, or None for the current date.
    """
    raw = request.query_params.get('today')
    if not raw:
        return None
    try:
        today = parse_date(raw)
    except ValueError:
        today = None
    if today is None:
        raise serializers.ValidationError({'today': f"{raw!r} is not a valid date"})
    return today


def list_or_create(request, model, serializer_class):
    context = {'today': requested_today(request)}
    if request.method == 'GET':
        serializer = serializer_class(model.objects.order_by('pk'), many=True, context=context)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = serializer_class(data=request.data, context=context)
    if serializer.is_valid():
        record = serializer.save()
        logger.info(f"created {model.__name__} {record.pk} ({record})")
        return Response(serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


def detail(request, model, serializer_class, account_id):
    record = get_object_or_404(model, pk=account_id)
    serializer = serializer_class(record, context={'today': requested_today(request)})
    return Response(serializer.data)


@api_view(['GET', 'POST'])
def accounts(request):
    return list_or_create(request, Account, AccountSerializer)


@api_view(['GET'])
def account_detail(request, account_id):
    return detail(request, Account, AccountSerializer, account_id)


@api_view(['GET'])
def account_about(request, account_id):
    account = get_object_or_404(Account, pk=account_id)
    today = requested_today(request)
    try:
        text = account.about_me(today)
    except AccountError as exc:
        logger.warning(f"about_me for account {account_id} failed: {exc}")
        fields = getattr(exc, 'fields', ('birthdate',))
        return Response({'error': str(exc), 'fields': list(fields)}, status=status.HTTP_400_BAD_REQUEST)
    return Response({'about_me': text})


@api_view(['GET', 'POST'])
def admin_accounts(request):
    return list_or_create(request, AdminAccount, AdminAccountSerializer)


@api_view(['GET'])
def admin_account_detail(request, account_id):
    return detail(request, AdminAccount, AdminAccountSerializer, account_id)
