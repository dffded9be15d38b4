from django.contrib import admin

# Customize admin site
admin.site.site_header = "Compliance Hub - Admin Panel"
admin.site.site_title = "Compliance Hub Admin"
admin.site.index_title = "Records of Processing Administration"
