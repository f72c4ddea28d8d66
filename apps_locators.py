"""XPath locators for the precisionFDA Apps pages."""

# ----- Apps main layout -----
APPS_MAIN_DIV = "//div[contains(@class, 'apps-main')]"

# ----- Apps tabs -----
# Featured tab when it is the selected one
APPS_FEATURED_ACTIVATED_LINK = (
    "//li[contains(concat(' ', normalize-space(@class), ' '), ' active ')]"
    "/a[contains(@href, '/apps/featured')]"
)
