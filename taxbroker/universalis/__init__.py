from ._client import TaxRateClient

(TaxRateClient,)
