from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from .services import delete_user_data


@extend_schema(
    responses={
        200: inline_serializer(
            name='UserDataDeleted',
            fields={
                'message': serializers.CharField(),
                'drinks_deleted': serializers.IntegerField(),
                'cafes_deleted': serializers.IntegerField(),
            },
        ),
    },
    description="Irreversibly delete all of the caller's drinks and cafes. The wishlist is kept.",
    tags=['user'],
)
@api_view(['DELETE'])
def user_data(request):
    """Wipe the caller's journal - thin HTTP handler."""
    counts = delete_user_data(user_id=request.user.id)
    return Response({'message': 'All data deleted successfully', **counts})
