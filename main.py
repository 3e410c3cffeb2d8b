import logging
import sys
import argparse

from sqlalchemy.orm import sessionmaker

from core.config_loader import RecommenderConfig, load_config
from core.recommender import RecommendationEngine, RecommendationError
from core.recommender.fallback import language_filtered_ranking
from database.database import create_db_engine
from database.init_db import init_db
from database.uow import recommendation_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_ranking(ranked, fallback: bool = False) -> None:
    header = f"{'Rank':<5} {'Translator':<28} {'Hybrid':>8} {'Content':>8} {'Collab':>8} {'Rating':>7}"
    print(header)
    print('-' * len(header))
    for i, r in enumerate(ranked, start=1):
        name = r.translator.full_name or r.translator.id
        print(
            f"{i:<5} {name[:28]:<28} {r.hybrid_score:>8.4f} {r.content_score:>8.4f} "
            f"{r.collaborative_score:>8.4f} {r.translator.rating:>7.1f}"
        )
    if fallback:
        print("\n(language-filtered fallback: hybrid recommendation unavailable)")


def recommend_for_order(repo, order_id: str, customer_id, config: RecommenderConfig):
    """
    Rank translators for one order, degrading to the language-filtered list.

    Returns (ranked, fallback), or None if the order cannot be loaded.
    """
    try:
        order = repo.get_order(order_id, default_complexity_score=config.default_complexity_score)
    except RecommendationError as e:
        logger.error(f"Could not load order {order_id}: {e}")
        return None

    if order is None:
        logger.error(f"Order {order_id} not found")
        return None

    customer_id = customer_id or order.customer_id
    try:
        return RecommendationEngine(repo, config).recommend(order, customer_id), False
    except RecommendationError as e:
        logger.warning(f"Hybrid recommendation failed, falling back: {e}")

    try:
        translators = repo.find_translators(order.source_language, order.target_language)
    except RecommendationError as e:
        logger.error(f"Fallback failed: {e}")
        return [], True
    return language_filtered_ranking(order, translators), True


def run_recommend(args) -> int:
    config = load_config(args.config)
    recommender_config = config.recommender

    engine = create_db_engine(config.database.url, statement_timeout_ms=config.database.statement_timeout_ms)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    with recommendation_uow(session_factory) as repo:
        result = recommend_for_order(repo, args.order_id, args.customer_id, recommender_config)

    if result is None:
        return 1
    ranked, fallback = result

    top_k = args.top_k if args.top_k is not None else recommender_config.top_k
    if top_k is not None:
        ranked = ranked[:top_k]

    print_ranking(ranked, fallback=fallback)
    return 0


def main():
    parser = argparse.ArgumentParser(description="LingoMatch translator recommender")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest='command', required=True)

    recommend = subparsers.add_parser('recommend', help='Rank translators for an order')
    recommend.add_argument('--order-id', required=True)
    recommend.add_argument('--customer-id', default=None,
                           help='Requesting customer (defaults to the order owner)')
    recommend.add_argument('--top-k', type=int, default=None)

    subparsers.add_parser('init-db', help='Create database tables')

    args = parser.parse_args()

    if args.command == 'init-db':
        init_db()
        return 0
    return run_recommend(args)


if __name__ == "__main__":
    sys.exit(main())
