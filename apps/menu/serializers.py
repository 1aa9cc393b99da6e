"""
Serializers for menu models.
"""

from rest_framework import serializers

from .models import Category, Menu, MenuVariation


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model."""

    menu_count = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = ["id", "name", "menu_count", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_menu_count(self, obj):
        """Get count of menus in this category."""
        return obj.menus.count()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Category name cannot be empty.")
        return value


class MenuVariationSerializer(serializers.ModelSerializer):
    """Serializer for MenuVariation model."""

    class Meta:
        model = MenuVariation
        fields = ["id", "menu", "name", "price_adjustment", "is_active", "created_at"]
        read_only_fields = ["id", "menu", "created_at"]


class MenuSerializer(serializers.ModelSerializer):
    """Serializer for Menu model, used for lists, details and writes."""

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    variations = serializers.SerializerMethodField()

    class Meta:
        model = Menu
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stock",
            "category",
            "category_name",
            "is_active",
            "image_url",
            "variations",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_variations(self, obj):
        """Active variations only; inactive ones are not offered at the POS."""
        variations = [v for v in obj.variations.all() if v.is_active]
        return MenuVariationSerializer(variations, many=True).data

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Menu name cannot be empty.")
        return value


class MenuGroupSerializer(serializers.Serializer):
    """A category with its menus, as returned by the grouped menu listing."""

    category_id = serializers.UUIDField(allow_null=True)
    category_name = serializers.CharField()
    menus = MenuSerializer(many=True)
