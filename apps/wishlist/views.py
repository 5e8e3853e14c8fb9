from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes
from apps.cafes.serializers import CafeSerializer, ErrorSerializer
from apps.cafes.services import get_user_cafes
from .serializers import WishlistItemCreateSerializer, WishlistItemSerializer
from .services import (
    get_wishlist,
    add_wishlist_item,
    remove_wishlist_item,
    convert_to_cafe,
    WishlistItemNotFoundError,
    InvalidWishlistItemError,
    DuplicateWishlistItemError,
    AlreadyVisitedError,
)


@extend_schema(
    methods=['GET'],
    responses={200: WishlistItemSerializer(many=True)},
    description="List the caller's wishlist, newest first.",
    tags=['wishlist'],
)
@extend_schema(
    methods=['POST'],
    request=WishlistItemCreateSerializer,
    responses={201: WishlistItemSerializer, 400: ErrorSerializer},
    description="Add a place to the wishlist. Rejected if already listed or already visited.",
    tags=['wishlist'],
)
@api_view(['GET', 'POST'])
def wishlist_list(request):
    """List or add wishlist items - thin HTTP handler."""
    user_id = request.user.id

    if request.method == 'GET':
        items = get_wishlist(user_id=user_id)
        return Response(WishlistItemSerializer(items, many=True).data)

    serializer = WishlistItemCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        item = add_wishlist_item(user_id=user_id, **serializer.validated_data)
    except (InvalidWishlistItemError, DuplicateWishlistItemError, AlreadyVisitedError) as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(WishlistItemSerializer(item).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: OpenApiTypes.OBJECT, 404: ErrorSerializer},
    description="Remove an item from the wishlist.",
    tags=['wishlist'],
)
@api_view(['DELETE'])
def wishlist_detail(request, item_id):
    try:
        remove_wishlist_item(user_id=request.user.id, item_id=item_id)
    except WishlistItemNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response({'message': 'Removed from wishlist'})


@extend_schema(
    request=None,
    responses={200: CafeSerializer, 404: ErrorSerializer},
    description="Mark a wishlist item as visited: it becomes a cafe and leaves the wishlist.",
    tags=['wishlist'],
)
@api_view(['POST'])
def wishlist_visit(request, item_id):
    """Convert a wishlist item to a cafe - thin HTTP handler."""
    user_id = request.user.id

    try:
        cafe, _ = convert_to_cafe(user_id=user_id, item_id=item_id)
    except WishlistItemNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )

    cafe = get_user_cafes(user_id=user_id).get(id=cafe.id)
    return Response(CafeSerializer(cafe).data)
