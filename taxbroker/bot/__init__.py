from ._bot import TAXBROKER, run_taxbroker

(TAXBROKER, run_taxbroker)
