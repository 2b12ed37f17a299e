import cProfile
import pstats

from churchy.church import plus, succ, zero
from churchy.term import App


def main():
    term = zero
    for i in range(30):
        term = App(succ, term).evaluate()
        term.render()
    plus(term)(term).render()


if __name__ == "__main__":
    with cProfile.Profile() as profile:
        main()
        print("bench done")
        results = pstats.Stats(profile)
        results.sort_stats(pstats.SortKey.TIME)
        results.dump_stats("results.profile")
