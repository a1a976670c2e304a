import logging
from decimal import ROUND_HALF_UP, Decimal

from config import LABEL_WIDTH
from models import ManifestGroup, ShipmentManifest

logger = logging.getLogger(__name__)


def format_amount(value):
    # whole numbers print without a decimal part: 50.0 -> "50"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def label(text, width=LABEL_WIDTH):
    return str(text).ljust(width)


def format_kg(kilograms):
    # one decimal, ties rounded up (0.25 -> "0.3")
    return str(Decimal(kilograms).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


#Shipping service
class ShippingService:
    def __init__(self, display):
        self.display = display

    @staticmethod
    def build_manifest(items):
        """Group shippable units by product name.

        The first unit of a name fixes the group's weight; later units only
        bump the count. The total weight sums every unit as given.
        """
        groups = {}
        total_weight = 0
        for item in items:
            group = groups.get(item.name)
            if group is None:
                groups[item.name] = ManifestGroup(item.name, item.weight)
            else:
                group.count += 1
                if item.weight != group.weight:
                    logger.debug("Ignoring weight %s for %s, keeping %s", item.weight, item.name, group.weight)
            total_weight += item.weight
        logger.debug("Built manifest with %d groups, %sg total", len(groups), total_weight)
        return ShipmentManifest(groups.values(), total_weight)

    def ship(self, items):
        manifest = self.build_manifest(items)
        self.display.write_line("")
        self.display.write_line("** Shipment notice **")
        for group in manifest.groups:
            self.display.write_line(label(f"{group.count}x {group.name}") + f"{format_amount(group.weight)}g")
        self.display.write_line(f"Total package weight {format_kg(manifest.total_weight_kg)}kg")
        logger.info("Shipped %d units in %d groups", sum(g.count for g in manifest.groups), len(manifest))
        return manifest
