# Services module

from bondpos.services.order_service import (
    OrderService,
    OrderTotals,
    OrderWithItems,
    apply_discount,
    compute_totals,
)
from bondpos.services.dashboard_service import (
    DashboardService,
    DateWindow,
    resolve_window,
)
