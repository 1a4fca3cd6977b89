# config package: authoritative source for all competition constants.
#
# Sub-modules:
#   cupping_params.py  - form attributes, baseline sheet, defect penalties,
#                        variance/grade/badge thresholds, blind code alphabet
