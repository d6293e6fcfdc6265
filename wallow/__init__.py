"""wallow: fetch, theme, pick and set desktop wallpapers from the terminal."""
