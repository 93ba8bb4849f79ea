"""Solutions to the Advent of Code 2023 puzzles, days 1 to 9 and 11 to 15."""