"""
Trello tools — boards, organizations, cards and search via the Trello REST API.

Authenticates with an OAuth header built from APP_KEY and TRELLO_TOKEN.
"""

from tools.trello import (
    get_boards, get_organizations, get_board_cards, get_member,
    search, update_card, delete_card,
)


TOOLS = [
    get_boards.TOOL,
    get_organizations.TOOL,
    get_board_cards.TOOL,
    get_member.TOOL,
    search.TOOL,
    update_card.TOOL,
    delete_card.TOOL,
]

HANDLERS = {
    "get-boards": get_boards.handle,
    "get-organizations": get_organizations.handle,
    "get-board-cards": get_board_cards.handle,
    "get-member": get_member.handle,
    "search": search.handle,
    "update-card": update_card.handle,
    "delete-card": delete_card.handle,
}
