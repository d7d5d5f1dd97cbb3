import argparse
import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from stockwatch.config import get_settings
from stockwatch.core.errors import PersistenceError
from stockwatch.core.logging import setup_logging
from stockwatch.database import session_scope
from stockwatch.services.alert_service import evaluate_low_stock
from stockwatch.services.sales_service import SalesActivity, StockoutEstimator
from stockwatch.services.store import InventoryStore

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Print low-stock alerts for one company.")
    parser.add_argument("--company-id", type=int, required=True, help="Tenant to evaluate.")
    parser.add_argument(
        "--window-days",
        type=int,
        default=None,
        help="Sales recency window. Default: LOW_STOCK_WINDOW_DAYS.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    window = args.window_days or get_settings().LOW_STOCK_WINDOW_DAYS

    try:
        with session_scope() as db:
            report = evaluate_low_stock(
                InventoryStore(db),
                SalesActivity(db),
                StockoutEstimator(db, window),
                args.company_id,
                window_days=window,
            )
    except PersistenceError as exc:
        logger.error("Low-stock report failed: %s", exc.message)
        return 1

    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
