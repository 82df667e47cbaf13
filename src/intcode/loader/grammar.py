''' Program text grammar '''

import pyparsing as pp


DELIMITER = ','

s_dec_const = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
word = s_dec_const
