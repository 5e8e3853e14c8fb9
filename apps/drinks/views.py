from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.cafes.serializers import ErrorSerializer
from .serializers import DrinkFilterSerializer, DrinkCreateSerializer, DrinkSerializer
from .services import (
    get_user_drinks,
    get_drink_types,
    get_last_drink,
    get_drink_by_id,
    create_drink,
    delete_drink,
    DrinkNotFoundError,
    InvalidCafeReferenceError,
    InvalidRatingError,
)


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('cafe_id', OpenApiTypes.UUID, description='Only drinks at this cafe'),
        OpenApiParameter('sort', OpenApiTypes.STR, enum=['logged_at', 'rating', 'created_at']),
        OpenApiParameter('order', OpenApiTypes.STR, enum=['asc', 'desc']),
    ],
    responses={200: DrinkSerializer(many=True), 400: ErrorSerializer},
    description="List the caller's drinks joined with cafe fields.",
    tags=['drinks'],
)
@extend_schema(
    methods=['POST'],
    request=DrinkCreateSerializer,
    responses={201: DrinkSerializer, 400: ErrorSerializer},
    description="Log a drink at one of the caller's cafes.",
    tags=['drinks'],
)
@api_view(['GET', 'POST'])
def drink_list(request):
    """List or log drinks - thin HTTP handler."""
    user_id = request.user.id

    if request.method == 'GET':
        filters = DrinkFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        drinks = get_user_drinks(user_id=user_id, **filters.validated_data)
        return Response(DrinkSerializer(drinks, many=True).data)

    serializer = DrinkCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        drink = create_drink(user_id=user_id, **serializer.validated_data)
    except (InvalidCafeReferenceError, InvalidRatingError) as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    drink = get_drink_by_id(user_id=user_id, drink_id=drink.id)
    return Response(DrinkSerializer(drink).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: OpenApiTypes.OBJECT},
    description="Distinct drink types, most frequent first. Used for autocomplete.",
    tags=['drinks'],
)
@api_view(['GET'])
def drink_types(request):
    return Response(get_drink_types(user_id=request.user.id))


@extend_schema(
    responses={200: DrinkSerializer, 404: ErrorSerializer},
    description="Most recently logged drink.",
    tags=['drinks'],
)
@api_view(['GET'])
def last_drink(request):
    try:
        drink = get_last_drink(user_id=request.user.id)
    except DrinkNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )
    return Response(DrinkSerializer(drink).data)


@extend_schema(
    methods=['GET'],
    responses={200: DrinkSerializer, 404: ErrorSerializer},
    description="Get one of the caller's drinks.",
    tags=['drinks'],
)
@extend_schema(
    methods=['DELETE'],
    responses={200: OpenApiTypes.OBJECT, 404: ErrorSerializer},
    description="Delete one of the caller's drinks.",
    tags=['drinks'],
)
@api_view(['GET', 'DELETE'])
def drink_detail(request, drink_id):
    """Get or delete a drink - thin HTTP handler."""
    user_id = request.user.id

    try:
        if request.method == 'GET':
            drink = get_drink_by_id(user_id=user_id, drink_id=drink_id)
            return Response(DrinkSerializer(drink).data)

        delete_drink(user_id=user_id, drink_id=drink_id)
    except DrinkNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({'message': 'Drink deleted successfully'})
