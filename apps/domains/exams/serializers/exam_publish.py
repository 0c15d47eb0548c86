from rest_framework import serializers


class ExamPublishSerializer(serializers.Serializer):
    isPublished = serializers.BooleanField()
