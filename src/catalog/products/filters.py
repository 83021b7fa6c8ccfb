import django_filters

from catalog.products.models import Product


class ProductFilter(django_filters.FilterSet):
    """Store-level predicates used by the paged scan.

    The query layer decides which predicate is active; this class only
    knows how to turn it into SQL.
    """

    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    active = django_filters.BooleanFilter(field_name="active")

    class Meta:
        model = Product
        fields = ["name", "active"]
