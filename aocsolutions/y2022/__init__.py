"""Solutions to the Advent of Code 2022 puzzles, days 1 to 16."""