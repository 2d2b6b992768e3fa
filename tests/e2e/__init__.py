"""Live storefront plan checks driven through Playwright"""
