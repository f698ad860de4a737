from ._fields import WorldNameField
from ._schemas import World, Subscription, TAX_RATES_FIELD

(WorldNameField, World, Subscription, TAX_RATES_FIELD)
