import unittest

from player_stats.config import DEFAULT_CONFIG_PATH
from player_stats.data_loader import load_player_stats
from player_stats.models import ALL_TEAMS, Totals
from player_stats.stats import aggregate, filter_stats, seasons_short, team_filters, to_frame


class StatsQueryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.stats = load_player_stats(DEFAULT_CONFIG_PATH)

    def test_aggregate_of_nothing_is_all_zero(self) -> None:
        totals = aggregate([])
        self.assertEqual(totals, Totals())
        self.assertEqual(totals.goals_per_match, 0.0)
        self.assertEqual(totals.assists_per_match, 0.0)

    def test_career_totals(self) -> None:
        totals = self.stats.career_totals
        self.assertEqual(totals.matches, 303)
        self.assertEqual(totals.goals, 505)
        self.assertEqual(totals.assists, 127)
        self.assertEqual(totals.minutes, 14440)
        self.assertEqual(totals.hat_tricks, 60)
        self.assertEqual(totals.braces, 150)
        self.assertEqual(totals.titles, 6)

    def test_team_aggregates_partition_the_total(self) -> None:
        summed = Totals()
        for team in self.stats.team_filters:
            if team.key == ALL_TEAMS:
                continue
            summed = summed + aggregate(self.stats.filter(team.key))
        self.assertEqual(summed, aggregate(self.stats.filter(ALL_TEAMS, None)))

    def test_team_and_season_filters_combine(self) -> None:
        rows = self.stats.filter("Cojos Fc", "24/25")
        self.assertEqual(len(rows), 1)
        self.assertEqual((rows[0].season, rows[0].hat_tricks, rows[0].braces), ("2024/25", 2, 14))

    def test_no_match_is_an_empty_list(self) -> None:
        self.assertEqual(self.stats.filter("Cojos Fc", "19/20"), [])
        self.assertEqual(self.stats.filter("Unknown Fc"), [])

    def test_filter_preserves_authoring_order(self) -> None:
        rows = filter_stats(self.stats.records, "Juvenil Fc")
        self.assertEqual([r.season_short for r in rows], ["20/21", "19/20"])
        self.assertEqual([r.club for r in rows], ["Juvenil", "Juvenil"])

    def test_option_lists(self) -> None:
        keys = [t.key for t in team_filters(self.stats.records)]
        self.assertEqual(keys, [ALL_TEAMS, "Cojos Fc", "Chamos Fc", "Panas Fc", "Barrio Fc", "Juvenil Fc"])
        self.assertEqual(seasons_short(self.stats.records)[:2], ["25/26", "24/25"])
        self.assertEqual(seasons_short(self.stats.records)[-1], "19/20")

    def test_club_cards_group_by_display_club(self) -> None:
        clubs = {c.club: c for c in self.stats.clubs}
        self.assertEqual(len(clubs), 5)
        self.assertEqual(clubs["Juvenil"].league, "Liga Juvenil")
        self.assertEqual((clubs["Juvenil"].totals.matches, clubs["Juvenil"].totals.goals), (142, 245))

    def test_frame_export(self) -> None:
        frame = self.stats.to_frame()
        self.assertEqual(len(frame), 7)
        self.assertEqual(int(frame["hat_tricks"].sum()), 60)
        self.assertTrue(to_frame([]).empty)
        self.assertIn("braces", to_frame([]).columns)


if __name__ == "__main__":
    unittest.main()
