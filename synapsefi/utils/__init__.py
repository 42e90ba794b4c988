"""
Pure formatting and validation helpers.

address_utils, score_utils, formatting and time_utils are independent; the
public names are re-exported from the synapsefi package.
"""
