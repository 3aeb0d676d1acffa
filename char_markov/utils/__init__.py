# char_markov/utils - logging, config and inspection-dump helpers
