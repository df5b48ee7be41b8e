from rotapair.gui.tabs.draw_tab import DrawTab
from rotapair.gui.tabs.history_tab import HistoryTab
from rotapair.gui.tabs.players_tab import PlayersTab

__all__ = ["DrawTab", "HistoryTab", "PlayersTab"]
