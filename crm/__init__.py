"""Audience segmentation core for the campaign CRM.

Customer records and campaigns live in the stores under
``crm.infrastructure``; the rule language that selects a campaign's audience
lives in ``crm.domain``.
"""
