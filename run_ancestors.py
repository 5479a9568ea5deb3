"""Fetch someone's ancestors from WikiTree and print the tree."""
import sys
sys.path.insert(0, ".")

from wikitree_api.config import configure_logging, settings
from wikitree_api.exceptions import WikiTreeError
from wikitree_api.family import WikiTreeSession, print_ancestral_tree


def main(key: str = "Churchill-4", depth: int = 3) -> int:
    configure_logging()

    with WikiTreeSession() as session:
        if settings.api.email and settings.api.password:
            if session.login(settings.api.email, settings.api.password):
                print(f"Logged in as {session.authenticated_wikitree_id}")
            else:
                print(f"Login failed: {session.client.login_result_status}")

        print("=" * 60)
        print(f"ANCESTORS OF {key} ({depth} generations)")
        print("=" * 60)

        try:
            ancestors = session.get_ancestors(key, depth)
        except WikiTreeError as e:
            print(f"Error: {e}")
            return 1

        if ancestors is None:
            print(f"No such person: {key}")
            return 1

        print(f"{len(ancestors.result_ancestors)} profiles returned")
        print_ancestral_tree(ancestors.ancestral_tree)

        stats = session.client.timing_stats
        print(f"\n{stats.count} request(s), {stats.total:.2f}s waiting on the server")
    return 0


if __name__ == "__main__":
    args = sys.argv[1:]
    sys.exit(main(*args[:1], *(int(a) for a in args[1:2])))
