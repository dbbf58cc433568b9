from rest_framework import serializers

from . import models


class ShapeSerializer(serializers.Serializer):
    kind = serializers.CharField()
    label = serializers.CharField(max_length=10)
    x = serializers.FloatField()
    y = serializers.FloatField()


class FormationTemplateSerializer(serializers.ModelSerializer):
    shapes = ShapeSerializer(many=True)

    class Meta:
        model = models.FormationTemplate
        fields = ['id', 'team', 'name', 'side', 'shapes', 'created_by', 'created_at']
        read_only_fields = ['team', 'created_by', 'created_at']
