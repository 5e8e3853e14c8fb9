from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import CafeCreateSerializer, CafeSerializer, ErrorSerializer
from .services import (
    get_user_cafes,
    get_cafe_by_id,
    create_cafe,
    CafeNotFoundError,
    InvalidCafeError,
)


@extend_schema(
    methods=['GET'],
    responses={200: CafeSerializer(many=True)},
    description="List the caller's cafes with drink count and last visit, most recently visited first.",
    tags=['cafes'],
)
@extend_schema(
    methods=['POST'],
    request=CafeCreateSerializer,
    responses={
        200: CafeSerializer,
        201: CafeSerializer,
        400: ErrorSerializer,
    },
    description="Create a cafe. A cafe with the same place_id is returned (200) instead of duplicated.",
    tags=['cafes'],
)
@api_view(['GET', 'POST'])
def cafe_list(request):
    """List or create the caller's cafes - thin HTTP handler."""
    user_id = request.user.id

    if request.method == 'GET':
        cafes = get_user_cafes(user_id=user_id)
        return Response(CafeSerializer(cafes, many=True).data)

    serializer = CafeCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        cafe, created = create_cafe(user_id=user_id, **serializer.validated_data)
    except InvalidCafeError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    # Re-read with visit statistics so both paths answer the same shape
    cafe = get_user_cafes(user_id=user_id).get(id=cafe.id)
    return Response(
        CafeSerializer(cafe).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@extend_schema(
    responses={
        200: CafeSerializer,
        404: ErrorSerializer,
    },
    description="Get one of the caller's cafes.",
    tags=['cafes'],
)
@api_view(['GET'])
def cafe_detail(request, cafe_id):
    """Get a single cafe - thin HTTP handler."""
    try:
        get_cafe_by_id(user_id=request.user.id, cafe_id=cafe_id)
    except CafeNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    cafe = get_user_cafes(user_id=request.user.id).get(id=cafe_id)
    return Response(CafeSerializer(cafe).data)
