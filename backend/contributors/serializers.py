# contributors/serializers.py

from rest_framework import serializers
from .models import Contributor


class ContributorTokenSerializer(serializers.ModelSerializer):
    """
    Compact {id, name} record used by the contributor token input.
    Field order is part of the output contract.
    """
    class Meta:
        model = Contributor
        fields = ('id', 'name')
        read_only_fields = fields
