from ._rates import TaxRates
from ._subscription import Subscription
from ._worlds import WorldRegistry

(TaxRates, Subscription, WorldRegistry)
