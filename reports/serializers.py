from rest_framework import serializers


class ReportRangeSerializer(serializers.Serializer):
    """``?from=YYYY-MM-DD&to=YYYY-MM-DD``; the range applies only when both are given."""

    def get_fields(self):
        # "from" is a keyword, so the fields are declared here
        fields = super().get_fields()
        fields['from'] = serializers.DateField(required=False, allow_null=True)
        fields['to'] = serializers.DateField(required=False, allow_null=True)
        return fields

    def validate(self, data):
        date_from = data.get('from')
        date_to = data.get('to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({'from': 'Start date must be on or before end date'})
        return data
