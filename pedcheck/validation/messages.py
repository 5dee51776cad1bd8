"""
Reason and explanation strings for pedigree findings.

Reasons describe a finding for the pedigree as a whole; explanations are
attached to each individual involved. Consumers compare these strings
verbatim, so they must not change.
"""

# Empty pedigree
EMPTY_REASON = "An empty pedigree is not permitted."

# Family partitioning
MULTIPLE_FAMILIES_REASON = "The pedigree contains multiple families."
ONE_FAMILY_REASON = "The pedigree contains individuals who belong to more than one family."
ONE_FAMILY_WHY = "Individual belongs to more than one family."

# Duplicate rows and dual parental role
DUPLICATE_ROWS_REASON = "Pedigree contains duplicate rows for at least one individual."
DUPLICATE_ROWS_WHY = "Person is defined in more than one line of the pedigree."
DUAL_ROLE_REASON = "There is at least one sample used as both father and mother."
DUAL_ROLE_WHY = "Person is used as both a mother and a father."

# Sex inconsistent with parental role
MOTHER_SEX_REASON = "There is at least one sample that occurs as a mother but is not female."
MOTHER_SEX_WHY = "Person is not female, but occurs as a mother."
FATHER_SEX_REASON = "There is at least one sample that occurs as a father but is not male."
FATHER_SEX_WHY = "Person is not male, but occurs as a father."

# Connectivity
CONNECTIVITY_REASON = "At least one individual is not properly connected to family."
CONNECTIVITY_WHY = "Individual is not properly connected to pedigree."

# Cycles
CYCLES_REASON = "There was at least one instance of someone being their own ancestor."
CYCLES_WHY = "Sample is an ancestor of itself."
