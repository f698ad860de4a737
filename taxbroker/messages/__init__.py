from ._locations import RETAINER_LOCATIONS, retainer_location
from ._reports import (
    report_tax_rates,
    report_server_section,
    embed_tax_rates,
    embed_all_servers_page,
)
from ._error_messages import (
    error_no_server,
    error_unknown_server,
    error_invalid_channel,
    error_no_servers_found,
    error_all_servers,
    error_admin_only,
    error_general,
    error_general_details,
)
from ._confirmations import confirmation_subscription, info_subscription_usage


(
    RETAINER_LOCATIONS,
    retainer_location,
    report_tax_rates,
    report_server_section,
    embed_tax_rates,
    embed_all_servers_page,
    error_no_server,
    error_unknown_server,
    error_invalid_channel,
    error_no_servers_found,
    error_all_servers,
    error_admin_only,
    error_general,
    error_general_details,
    confirmation_subscription,
    info_subscription_usage,
)
