"""MA & CO Accountants website: tax estimator, UK location pages and content."""
