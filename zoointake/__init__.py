"""
Zoo intake: name newly arriving animals and append them to the population report.
"""
