EMPTY_ROW = "| | | | | | | |"


def play(board, moves):
    for column in moves:
        board.place_token(column)
    return board


def grid(*rows):
    return "\n".join(rows)
