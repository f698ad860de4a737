from ._messenger import DiscordMessenger
from ._queries import (
    normalize_server_arg,
    validate_server,
    paginate,
    single_server_report,
    all_servers_pages,
)
from ._subscriptions import configure_subscription
from ._scheduler import RefreshScheduler

(
    DiscordMessenger,
    normalize_server_arg,
    validate_server,
    paginate,
    single_server_report,
    all_servers_pages,
    configure_subscription,
    RefreshScheduler,
)
